"""Candidate support profiles of two-player games.

Support enumeration solves one program per pair of supports, so every
pair of non-empty action subsets is a candidate. Actions are tagged with
their player before enumeration: the cartesian product is set-based, and
untagged actions that share a name across players would collapse.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from nashfinder.core.exceptions import InvalidArgumentError
from nashfinder.core.logging import get_logger
from nashfinder.game.player_action import PlayerAction
from nashfinder.game.strategic_game import GameAccessor
from nashfinder.util.sets import cartesian_product, power_set

PlayerT = TypeVar("PlayerT")
ActionT = TypeVar("ActionT")

logger = get_logger(__name__)


@dataclass(frozen=True)
class SupportProfile(Generic[ActionT]):
    """Supports of the first and the second player.

    Attributes:
        first: Actions of the first player, in game order.
        second: Actions of the second player, in game order.
    """

    first: tuple[ActionT, ...]
    second: tuple[ActionT, ...]

    @property
    def is_balanced(self) -> bool:
        """Whether both supports have the same size."""
        return len(self.first) == len(self.second)

    def __str__(self) -> str:
        first = ", ".join(map(str, self.first))
        second = ", ".join(map(str, self.second))
        return f"({first}) x ({second})"


def player_supports(
    game: GameAccessor[PlayerT, ActionT], player: PlayerT
) -> list[frozenset[PlayerAction[PlayerT, ActionT]]]:
    """Non-empty subsets of a player's actions, tagged with the player."""
    tagged = [PlayerAction(player, action) for action in game.player_actions(player)]
    return [support for support in power_set(tagged) if support]


def enumerate_support_profiles(
    game: GameAccessor[PlayerT, ActionT],
    equal_size: bool = False,
) -> list[SupportProfile[ActionT]]:
    """Enumerate the candidate support profiles of a two-player game.

    Args:
        game: Game whose first two players are enumerated.
        equal_size: Only keep profiles whose supports have the same size,
            which suffices for non-degenerate games.

    Returns:
        Support profiles, grouped by the first player's support.

    Raises:
        InvalidArgumentError: If the game has fewer than two players.
    """
    players = list(game.players)[:2]
    if len(players) < 2:
        raise InvalidArgumentError(
            f"Support profiles need a game with two players, got {len(players)}"
        )
    first_player, second_player = players
    if first_player == second_player:
        raise InvalidArgumentError(
            f"Support profiles need two distinct players, got {first_player!r} twice"
        )
    first_actions = list(game.player_actions(first_player))
    second_actions = list(game.player_actions(second_player))

    profiles: list[SupportProfile[ActionT]] = []
    combinations = cartesian_product(
        [
            player_supports(game, first_player),
            player_supports(game, second_player),
        ]
    )
    for combination in combinations:
        by_player: dict[Any, frozenset[PlayerAction[PlayerT, ActionT]]] = {
            next(iter(support)).player: support for support in combination
        }
        profile = SupportProfile(
            first=_ordered(by_player[first_player], first_player, first_actions),
            second=_ordered(by_player[second_player], second_player, second_actions),
        )
        if equal_size and not profile.is_balanced:
            continue
        profiles.append(profile)

    logger.debug(
        "support_profiles_enumerated",
        count=len(profiles),
        equal_size=equal_size,
    )
    return profiles


def _ordered(
    support: frozenset[PlayerAction[PlayerT, ActionT]],
    player: PlayerT,
    actions: list[ActionT],
) -> tuple[ActionT, ...]:
    return tuple(a for a in actions if PlayerAction(player, a) in support)
