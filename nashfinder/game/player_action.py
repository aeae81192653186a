"""Lookup key pairing a player with one of its actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

PlayerT = TypeVar("PlayerT")
ActionT = TypeVar("ActionT")


@dataclass(frozen=True)
class PlayerAction(Generic[PlayerT, ActionT]):
    """An action of a specific player.

    Used as the variable key for action probabilities in solver results.
    Two player actions are equal when both their player and their action
    are equal, so actions with the same name stay distinct across players.

    Attributes:
        player: The player owning the action.
        action: The action.
    """

    player: PlayerT
    action: ActionT

    def __str__(self) -> str:
        return f"{self.player}:{self.action}"
