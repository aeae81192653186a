"""Nash equilibrium model and its extraction from solved program results."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from nashfinder.core.exceptions import InvalidArgumentError
from nashfinder.core.logging import get_logger
from nashfinder.game.player_action import PlayerAction
from nashfinder.game.strategic_game import GameAccessor
from nashfinder.nash.result import ExpectedUtility, SolvedProgramResult
from nashfinder.nash.strategy import NashStrategy
from nashfinder.util.math import ROUNDING_DECIMAL_SCALE, round_number_to

PlayerT = TypeVar("PlayerT")
ActionT = TypeVar("ActionT")

logger = get_logger(__name__)


@dataclass
class NashEquilibrium(Generic[PlayerT, ActionT]):
    """A Nash equilibrium of a two-player game.

    Holds a mixed strategy and an expected utility for every player.
    Equilibria are compared and hashed by their content; the order in
    which players were set does not matter.

    Attributes:
        strategies: Player to the strategy it plays in this equilibrium.
        utilities: Player to its expected utility in this equilibrium.
    """

    strategies: dict[PlayerT, NashStrategy[ActionT]] = field(default_factory=dict)
    utilities: dict[PlayerT, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Setters must not reach into mappings owned by the caller
        self.strategies = dict(self.strategies)
        self.utilities = dict(self.utilities)

    @classmethod
    def extract_from_lcp_result(
        cls,
        result: SolvedProgramResult | None,
        game: GameAccessor[PlayerT, ActionT],
    ) -> NashEquilibrium[PlayerT, ActionT] | None:
        """Create the equilibrium described by a solved program.

        The first two players of the game are the first and second player
        positions of the program. Utilities and probabilities are rounded
        to ROUNDING_DECIMAL_SCALE places.

        Args:
            result: Result of the solved program, None if the solver found
                no solution.
            game: Game the program was formulated for.

        Returns:
            The equilibrium, or None if there is no Nash equilibrium.

        Raises:
            InvalidArgumentError: If the game has fewer than two players.
        """
        if result is None:
            logger.info("no_equilibrium_found")
            return None

        players = list(game.players)[:2]
        if len(players) < 2:
            raise InvalidArgumentError(
                "Could not extract a Nash equilibrium: the game must have "
                f"two players, got {len(players)}"
            )
        first_player, second_player = players
        if first_player == second_player:
            raise InvalidArgumentError(
                "Could not extract a Nash equilibrium: the game must have "
                f"two distinct players, got {first_player!r} twice"
            )

        equilibrium: NashEquilibrium[PlayerT, ActionT] = cls()
        positions = (
            (first_player, ExpectedUtility.FIRST_PLAYER),
            (second_player, ExpectedUtility.SECOND_PLAYER),
        )
        for player, position in positions:
            utility = result.expected_utility(position)
            if utility is not None:
                utility = round_number_to(utility, ROUNDING_DECIMAL_SCALE)
            equilibrium.set_expected_utility_for_player(player, utility)

        for player, _ in positions:
            strategy = extract_player_strategy(
                result, player, game.player_actions(player)
            )
            equilibrium.set_nash_strategy_for_player(player, strategy)

        logger.debug(
            "equilibrium_extracted",
            players=[str(p) for p in players],
            utilities=[equilibrium.utilities[p] for p in players],
        )
        return equilibrium

    @property
    def players(self) -> list[PlayerT]:
        """Players with a strategy, in the order their strategies were set."""
        return list(self.strategies)

    def utility_of(self, player: PlayerT) -> float | None:
        """Expected utility of a player, None if not set."""
        return self.utilities.get(player)

    def strategy_of(self, player: PlayerT) -> NashStrategy[ActionT] | None:
        """Strategy of a player, None if not set."""
        return self.strategies.get(player)

    def set_expected_utility_for_player(
        self, player: PlayerT, expected_utility: float | None
    ) -> None:
        self.utilities[player] = expected_utility

    def set_nash_strategy_for_player(
        self, player: PlayerT, strategy: NashStrategy[ActionT]
    ) -> None:
        self.strategies[player] = strategy

    def is_pure(self) -> bool:
        """Check if every player plays a single action."""
        return bool(self.strategies) and all(
            strategy.is_pure() for strategy in self.strategies.values()
        )

    def is_mixed(self) -> bool:
        """Check if any player mixes over several actions."""
        return not self.is_pure()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary.

        Players and actions are converted to strings.
        """
        return {
            "strategies": {
                str(player): {str(a): p for a, p in strategy.items()}
                for player, strategy in self.strategies.items()
            },
            "utilities": {
                str(player): utility for player, utility in self.utilities.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NashEquilibrium[str, str]:
        """Deserialize from a dictionary created by to_dict."""
        return cls(
            strategies={
                player: NashStrategy(probabilities)
                for player, probabilities in data["strategies"].items()
            },
            utilities=dict(data["utilities"]),
        )

    def __hash__(self) -> int:
        return hash(
            (
                frozenset(self.strategies.items()),
                frozenset(self.utilities.items()),
            )
        )

    def __str__(self) -> str:
        return "\n".join(
            f"{player}: {self.utilities.get(player)} {strategy}"
            for player, strategy in self.strategies.items()
        )


def extract_player_strategy(
    result: SolvedProgramResult,
    player: PlayerT,
    player_actions: Iterable[ActionT],
) -> NashStrategy[ActionT]:
    """Create the strategy a solved program assigns to a player.

    Actions without a probability in the result are left out of the
    strategy, which means they are played with probability zero.

    Args:
        result: Result of the solved program.
        player: Player to extract the strategy for.
        player_actions: Actions of the player in the game.

    Returns:
        The player's strategy with rounded probabilities.
    """
    strategy: NashStrategy[ActionT] = NashStrategy()
    for action in player_actions:
        probability = result.probability(PlayerAction(player, action))
        if probability is not None:
            strategy.add_action(
                action, round_number_to(probability, ROUNDING_DECIMAL_SCALE)
            )
    return strategy
