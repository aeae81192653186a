"""Tests for the strategic game model."""

import numpy as np
import pytest

from nashfinder.core.exceptions import InvalidArgumentError
from nashfinder.game.player_action import PlayerAction
from nashfinder.game.strategic_game import StrategicGame


class TestPlayerAction:
    """Tests for PlayerAction."""

    def test_equality_by_player_and_action(self) -> None:
        assert PlayerAction("P1", "a") == PlayerAction("P1", "a")
        assert hash(PlayerAction("P1", "a")) == hash(PlayerAction("P1", "a"))

    def test_same_action_of_different_players(self) -> None:
        assert PlayerAction("P1", "a") != PlayerAction("P2", "a")
        assert len({PlayerAction("P1", "a"), PlayerAction("P2", "a")}) == 2

    def test_immutable(self) -> None:
        player_action = PlayerAction("P1", "a")
        with pytest.raises(AttributeError):
            player_action.action = "b"  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(PlayerAction("Alice", "heads")) == "Alice:heads"


class TestStrategicGame:
    """Tests for StrategicGame."""

    def test_players_keep_insertion_order(self) -> None:
        game: StrategicGame[str, str] = StrategicGame()
        for player in ["Zed", "Amy", "Bob"]:
            game.add_player(player)
        assert game.players == ["Zed", "Amy", "Bob"]

    def test_actions_keep_insertion_order(
        self, two_player_game: StrategicGame[str, str]
    ) -> None:
        assert two_player_game.player_actions("P1") == ["a", "b"]
        assert two_player_game.player_actions("P2") == ["c", "d"]

    def test_add_player_twice_keeps_actions(
        self, two_player_game: StrategicGame[str, str]
    ) -> None:
        two_player_game.add_player("P1")
        assert two_player_game.players == ["P1", "P2"]
        assert two_player_game.player_actions("P1") == ["a", "b"]

    def test_add_action_twice(self, two_player_game: StrategicGame[str, str]) -> None:
        two_player_game.add_action("P1", "a")
        assert two_player_game.player_actions("P1") == ["a", "b"]

    def test_unknown_player(self, two_player_game: StrategicGame[str, str]) -> None:
        with pytest.raises(InvalidArgumentError, match="Unknown player"):
            two_player_game.player_actions("P3")
        with pytest.raises(InvalidArgumentError, match="Unknown player"):
            two_player_game.add_action("P3", "x")

    def test_set_and_get_payoff(
        self, two_player_game: StrategicGame[str, str]
    ) -> None:
        two_player_game.set_payoff(("a", "d"), "P2", 3)
        assert two_player_game.payoff(("a", "d"), "P2") == 3.0
        assert two_player_game.payoff(["a", "d"], "P1") is None

    def test_payoff_profile_length(
        self, two_player_game: StrategicGame[str, str]
    ) -> None:
        with pytest.raises(InvalidArgumentError, match="one action per player"):
            two_player_game.set_payoff(("a",), "P1", 1.0)

    def test_payoff_invalid_action(
        self, two_player_game: StrategicGame[str, str]
    ) -> None:
        with pytest.raises(InvalidArgumentError, match="not available"):
            two_player_game.set_payoff(("c", "a"), "P1", 1.0)

    def test_no_players_after_payoffs(
        self, two_player_game: StrategicGame[str, str]
    ) -> None:
        two_player_game.set_payoff(("a", "c"), "P1", 1.0)
        with pytest.raises(InvalidArgumentError, match="after payoffs"):
            two_player_game.add_player("P3")

    def test_payoff_matrices(self, two_player_game: StrategicGame[str, str]) -> None:
        two_player_game.set_payoff(("a", "c"), "P1", 1.0)
        two_player_game.set_payoff(("a", "c"), "P2", -1.0)
        two_player_game.set_payoff(("b", "d"), "P1", 2.0)
        payoff_1, payoff_2 = two_player_game.payoff_matrices()
        np.testing.assert_array_equal(payoff_1, [[1.0, 0.0], [0.0, 2.0]])
        np.testing.assert_array_equal(payoff_2, [[-1.0, 0.0], [0.0, 0.0]])

    def test_payoff_matrices_need_two_players(self) -> None:
        game: StrategicGame[str, str] = StrategicGame()
        game.add_player("solo")
        game.add_action("solo", "x")
        with pytest.raises(InvalidArgumentError, match="exactly two players"):
            game.payoff_matrices()

    def test_repr(self, two_player_game: StrategicGame[str, str]) -> None:
        assert repr(two_player_game) == (
            "StrategicGame(name='synthetic', players=['P1', 'P2'])"
        )
