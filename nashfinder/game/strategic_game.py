"""Strategic (normal-form) game model."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from typing import Generic, Protocol, TypeVar

import numpy as np

from nashfinder.core.exceptions import InvalidArgumentError

PlayerT = TypeVar("PlayerT")
ActionT = TypeVar("ActionT")


class GameAccessor(Protocol[PlayerT, ActionT]):
    """What equilibrium extraction needs to know about a game."""

    @property
    def players(self) -> Sequence[PlayerT]:
        """Players in a fixed order."""
        ...

    def player_actions(self, player: PlayerT) -> Collection[ActionT]:
        """Actions available to a player, in a fixed order."""
        ...


class StrategicGame(Generic[PlayerT, ActionT]):
    """A finite game in strategic form.

    Players and their actions keep their insertion order. Payoffs are
    stored per action profile, a tuple with one action per player in
    player order, and per player.

    Example:
        game = StrategicGame("Matching pennies")
        game.add_player("Alice")
        game.add_action("Alice", "heads")
        ...
        game.set_payoff(("heads", "heads"), "Alice", 1.0)
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._actions: dict[PlayerT, dict[ActionT, None]] = {}
        self._payoffs: dict[tuple[ActionT, ...], dict[PlayerT, float]] = {}

    @property
    def players(self) -> list[PlayerT]:
        """Ordered list of players."""
        return list(self._actions)

    def add_player(self, player: PlayerT) -> None:
        """Add a player. Adding a known player again has no effect."""
        if player in self._actions:
            return
        if self._payoffs:
            raise InvalidArgumentError(
                f"Cannot add player {player!r} after payoffs were set"
            )
        self._actions[player] = {}

    def add_action(self, player: PlayerT, action: ActionT) -> None:
        """Add an action to a player's action set."""
        self._require_player(player)
        self._actions[player][action] = None

    def player_actions(self, player: PlayerT) -> list[ActionT]:
        """Ordered actions of a player."""
        self._require_player(player)
        return list(self._actions[player])

    def set_payoff(
        self,
        profile: Sequence[ActionT],
        player: PlayerT,
        payoff: float,
    ) -> None:
        """Set a player's payoff for an action profile.

        Args:
            profile: One action per player, in player order.
            player: Player receiving the payoff.
            payoff: The payoff value.

        Raises:
            InvalidArgumentError: If the player is unknown or the profile
                does not pick a valid action for every player.
        """
        self._require_player(player)
        key = self._validate_profile(profile)
        self._payoffs.setdefault(key, {})[player] = float(payoff)

    def payoff(self, profile: Sequence[ActionT], player: PlayerT) -> float | None:
        """Get a player's payoff for an action profile, None if unset."""
        self._require_player(player)
        return self._payoffs.get(tuple(profile), {}).get(player)

    def payoff_matrices(self) -> tuple[np.ndarray, np.ndarray]:
        """Payoff bimatrix of a two-player game.

        Rows follow the first player's actions and columns the second
        player's actions. Unset payoffs are 0.0.

        Returns:
            Payoff matrices of the first and the second player.

        Raises:
            InvalidArgumentError: If the game does not have exactly two
                players.
        """
        players = self.players
        if len(players) != 2:
            raise InvalidArgumentError(
                f"Payoff matrices need exactly two players, got {len(players)}"
            )
        first, second = players
        rows = self.player_actions(first)
        columns = self.player_actions(second)
        payoff_1 = np.zeros((len(rows), len(columns)))
        payoff_2 = np.zeros((len(rows), len(columns)))
        for i, row_action in enumerate(rows):
            for j, column_action in enumerate(columns):
                payoffs = self._payoffs.get((row_action, column_action), {})
                payoff_1[i, j] = payoffs.get(first, 0.0)
                payoff_2[i, j] = payoffs.get(second, 0.0)
        return payoff_1, payoff_2

    def _require_player(self, player: PlayerT) -> None:
        if player not in self._actions:
            raise InvalidArgumentError(f"Unknown player: {player!r}")

    def _validate_profile(self, profile: Sequence[ActionT]) -> tuple[ActionT, ...]:
        key = tuple(profile)
        if len(key) != len(self._actions):
            raise InvalidArgumentError(
                f"Action profile {list(key)!r} must have one action per player, "
                f"expected {len(self._actions)}"
            )
        for player, action in zip(self._actions, key):
            if action not in self._actions[player]:
                raise InvalidArgumentError(
                    f"Action {action!r} is not available to player {player!r}"
                )
        return key

    def __repr__(self) -> str:
        return f"StrategicGame(name={self.name!r}, players={self.players!r})"
