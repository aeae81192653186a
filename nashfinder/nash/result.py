"""Access to the values of a solved linear (complementarity) program.

The solver itself is external. NashFinder only reads two kinds of
variables from its result: the expected utility of the first and of the
second player, and the probability the solver assigned to each player
action.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Protocol

from nashfinder.game.player_action import PlayerAction


class ExpectedUtility(StrEnum):
    """Variable tags for the expected utility of a player position."""

    FIRST_PLAYER = "first_player"
    SECOND_PLAYER = "second_player"


class SolvedProgramResult(Protocol):
    """Result of a solved program, queried by variable.

    Both queries return None for variables the solver did not report.
    Solvers commonly omit variables whose value is zero.
    """

    def expected_utility(self, position: ExpectedUtility) -> float | None:
        """Value of the expected utility variable of a player position."""
        ...

    def probability(self, player_action: PlayerAction[Any, Any]) -> float | None:
        """Value of the probability variable of a player action."""
        ...


class MappingProgramResult:
    """Solved program result backed by a plain mapping of variables.

    Keys are :class:`ExpectedUtility` tags or :class:`PlayerAction` pairs.

    Example:
        result = MappingProgramResult({
            ExpectedUtility.FIRST_PLAYER: 0.5,
            PlayerAction("Alice", "heads"): 0.5,
        })
    """

    def __init__(
        self,
        values: Mapping[ExpectedUtility | PlayerAction[Any, Any], float | None],
    ) -> None:
        self._values = dict(values)

    @classmethod
    def from_values(
        cls,
        utilities: Mapping[ExpectedUtility, float | None],
        probabilities: Mapping[Any, Mapping[Any, float | None]],
    ) -> MappingProgramResult:
        """Build a result from per-position utilities and per-player probabilities.

        Args:
            utilities: Expected utility per player position.
            probabilities: Player to a mapping of action to probability.
        """
        values: dict[ExpectedUtility | PlayerAction[Any, Any], float | None] = dict(
            utilities
        )
        for player, actions in probabilities.items():
            for action, probability in actions.items():
                values[PlayerAction(player, action)] = probability
        return cls(values)

    def expected_utility(self, position: ExpectedUtility) -> float | None:
        return self._values.get(position)

    def probability(self, player_action: PlayerAction[Any, Any]) -> float | None:
        return self._values.get(player_action)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"MappingProgramResult({len(self._values)} variables)"
