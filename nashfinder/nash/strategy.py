"""Mixed strategy of a single player."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Generic, TypeVar

import numpy as np

ActionT = TypeVar("ActionT")


class NashStrategy(Mapping[ActionT, float], Generic[ActionT]):
    """Probability of each action a player plays in an equilibrium.

    Behaves as a read-only ordered mapping from action to probability.
    Actions keep the order they were added in. Only actions with a
    probability are stored; every other action is played with probability
    zero.
    """

    def __init__(self, probabilities: Mapping[ActionT, float] | None = None) -> None:
        self._probabilities: dict[ActionT, float] = dict(probabilities or {})

    def add_action(self, action: ActionT, probability: float) -> None:
        """Set the probability of an action, keeping its first position."""
        self._probabilities[action] = probability

    def probability_of(self, action: ActionT) -> float:
        """Probability of an action, 0.0 for actions not in the strategy."""
        return self._probabilities.get(action, 0.0)

    def support(self) -> list[ActionT]:
        """Actions played with a positive probability."""
        return [action for action, p in self._probabilities.items() if p > 0]

    def is_pure(self) -> bool:
        """Check if exactly one action is played."""
        return len(self.support()) == 1

    def to_array(self, actions: Iterable[ActionT]) -> np.ndarray:
        """Probability vector over the given actions, zeros for absent ones."""
        return np.array([self.probability_of(action) for action in actions])

    def __getitem__(self, action: ActionT) -> float:
        return self._probabilities[action]

    def __iter__(self) -> Iterator[ActionT]:
        return iter(self._probabilities)

    def __len__(self) -> int:
        return len(self._probabilities)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NashStrategy):
            return NotImplemented
        return self._probabilities == other._probabilities

    def __hash__(self) -> int:
        return hash(frozenset(self._probabilities.items()))

    def __str__(self) -> str:
        entries = ", ".join(f"{a}={p}" for a, p in self._probabilities.items())
        return "{" + entries + "}"

    def __repr__(self) -> str:
        return f"NashStrategy({self._probabilities!r})"
