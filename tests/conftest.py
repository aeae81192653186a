"""Shared fixtures for NashFinder tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from nashfinder.core.logging import reset_logging
from nashfinder.core.settings import reset_settings
from nashfinder.game.player_action import PlayerAction
from nashfinder.game.strategic_game import StrategicGame
from nashfinder.nash.result import ExpectedUtility, MappingProgramResult

MATCHING_PENNIES_YAML = """
name: Matching pennies
players: [Alice, Bob]
actions:
  Alice: [heads, tails]
  Bob: [heads, tails]
payoffs:
  - profile: [heads, heads]
    utilities: [1, -1]
  - profile: [heads, tails]
    utilities: [-1, 1]
  - profile: [tails, heads]
    utilities: [-1, 1]
  - profile: [tails, tails]
    utilities: [1, -1]
"""

MATCHING_PENNIES_RESULT_YAML = """
solved: true
utilities:
  first_player: 0.0
  second_player: 0.0
probabilities:
  Alice: {heads: 0.5, tails: 0.5}
  Bob: {heads: 0.5, tails: 0.5}
"""


@pytest.fixture(autouse=True)
def clean_global_state():  # type: ignore[misc]
    """Reset logging and shared settings around each test."""
    reset_logging()
    reset_settings()
    yield
    reset_logging()
    reset_settings()


@pytest.fixture
def two_player_game() -> StrategicGame[str, str]:
    """Game with P1 playing a or b and P2 playing c or d."""
    game: StrategicGame[str, str] = StrategicGame("synthetic")
    game.add_player("P1")
    game.add_action("P1", "a")
    game.add_action("P1", "b")
    game.add_player("P2")
    game.add_action("P2", "c")
    game.add_action("P2", "d")
    return game


@pytest.fixture
def solved_result() -> MappingProgramResult:
    """Solver output for two_player_game; P2's action d is not reported."""
    return MappingProgramResult(
        {
            ExpectedUtility.FIRST_PLAYER: 0.3333,
            ExpectedUtility.SECOND_PLAYER: 0.6667,
            PlayerAction("P1", "a"): 0.5,
            PlayerAction("P1", "b"): 0.5,
            PlayerAction("P2", "c"): 1.0,
        }
    )


@pytest.fixture
def game_file(tmp_path: Path) -> Path:
    """Matching pennies game document on disk."""
    path = tmp_path / "matching_pennies.yaml"
    path.write_text(MATCHING_PENNIES_YAML)
    return path


@pytest.fixture
def result_file(tmp_path: Path) -> Path:
    """Solver result for matching pennies on disk."""
    path = tmp_path / "result.yaml"
    path.write_text(MATCHING_PENNIES_RESULT_YAML)
    return path
