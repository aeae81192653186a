"""Tests for power sets and cartesian products."""

from __future__ import annotations

from pathlib import Path

import pytest
from structlog.testing import capture_logs

from nashfinder.core.exceptions import InvalidArgumentError
from nashfinder.core.settings import (
    DEFAULT_MAX_ENUMERATION_SIZE,
    NashFinderSettings,
    use_settings,
)
from nashfinder.game.player_action import PlayerAction
from nashfinder.util.sets import cartesian_product, power_set


def _limit_enumerations(size: int) -> None:
    use_settings(
        NashFinderSettings(_skip_file_loading=True, max_enumeration_size=size)
    )


class TestPowerSet:
    """Tests for power_set."""

    def test_empty_set(self) -> None:
        assert power_set(set()) == [frozenset()]

    @pytest.mark.parametrize("size", [0, 1, 2, 3, 5, 8])
    def test_cardinality(self, size: int) -> None:
        """An n-element set has 2^n subsets, all distinct."""
        subsets = power_set(range(size))
        assert len(subsets) == 2**size
        assert len(set(subsets)) == 2**size

    def test_contains_empty_and_full_set(self) -> None:
        items = {"a", "b", "c"}
        subsets = power_set(items)
        assert frozenset() in subsets
        assert frozenset(items) in subsets

    def test_every_element_is_subset(self) -> None:
        items = {"x", "y", "z", "w"}
        for subset in power_set(items):
            assert subset <= items

    def test_head_order(self) -> None:
        """Subsets with the head come before the same subset without it."""
        assert power_set(["a", "b"]) == [
            frozenset({"a", "b"}),
            frozenset({"b"}),
            frozenset({"a"}),
            frozenset(),
        ]

    def test_duplicates_ignored(self) -> None:
        assert len(power_set(["a", "a", "b"])) == 4

    def test_deterministic_for_ordered_input(self) -> None:
        assert power_set(["x", "y", "z"]) == power_set(["x", "y", "z"])

    def test_large_enumeration_warning(self) -> None:
        _limit_enumerations(4)
        with capture_logs() as logs:
            power_set(range(3))
        events = [log for log in logs if log["event"] == "large_enumeration"]
        assert len(events) == 1
        assert events[0]["operation"] == "power_set"
        assert events[0]["size"] == 8
        assert events[0]["log_level"] == "warning"

    def test_no_warning_below_limit(self) -> None:
        _limit_enumerations(8)
        with capture_logs() as logs:
            power_set(range(3))
        assert not [log for log in logs if log["event"] == "large_enumeration"]

    def test_invalid_environment_settings(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Settings that fail validation fall back to the default limit."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("NASHFINDER_LOGGING__LEVEL", "verbose")
        with capture_logs() as logs:
            subsets = power_set(["a", "b"])
        assert len(subsets) == 4
        events = [log for log in logs if log["event"] == "invalid_settings"]
        assert len(events) == 1
        assert events[0]["limit"] == DEFAULT_MAX_ENUMERATION_SIZE

    def test_invalid_config_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "nashfinder.config.yaml").write_text("max_enumeration_size: 0\n")
        monkeypatch.chdir(tmp_path)
        assert power_set(["a"]) == [frozenset({"a"}), frozenset()]
        assert len(cartesian_product([["a"], ["b", "c"]])) == 2


class TestCartesianProduct:
    """Tests for cartesian_product."""

    def test_two_disjoint_sets(self) -> None:
        first = {"a", "b", "c"}
        second = {1, 2}
        product = cartesian_product([first, second])
        assert len(product) == len(first) * len(second)
        assert frozenset({"a", 1}) in product
        assert frozenset({"c", 2}) in product

    def test_three_sets(self) -> None:
        product = cartesian_product([{"a", "b"}, {1, 2}, {True}])
        # True == 1, so combinations picking 1 and True collapse
        assert frozenset({"a", 1}) in product
        assert frozenset({"a", 2, True}) in product

    def test_three_disjoint_sets(self) -> None:
        product = cartesian_product([{"a", "b"}, {"c", "d"}, {"e", "f", "g"}])
        assert len(product) == 2 * 2 * 3
        for combination in product:
            assert len(combination) == 3

    def test_each_combination_picks_one_of_each(self) -> None:
        first = ["a", "b"]
        second = ["c", "d", "e"]
        for combination in cartesian_product([first, second]):
            assert len(combination & set(first)) == 1
            assert len(combination & set(second)) == 1

    def test_order_follows_inputs(self) -> None:
        assert cartesian_product([["a", "b"], ["c", "d"]]) == [
            frozenset({"a", "c"}),
            frozenset({"a", "d"}),
            frozenset({"b", "c"}),
            frozenset({"b", "d"}),
        ]

    @pytest.mark.parametrize("sets", [[], [{"a", "b"}]])
    def test_fewer_than_two_sets(self, sets: list[set[str]]) -> None:
        with pytest.raises(InvalidArgumentError, match="at least two sets"):
            cartesian_product(sets)

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            cartesian_product([])

    def test_single_set_is_product_with_itself(self) -> None:
        items = {"a", "b", "c"}
        assert cartesian_product(items) == cartesian_product([items, items])

    def test_shared_elements_collapse(self) -> None:
        """Set-based combinations lose which position an element came from."""
        product = cartesian_product({"a", "b"})
        assert sorted(map(sorted, product)) == [["a"], ["a", "b"], ["b"]]
        assert len(product) < 2 * 2

    def test_tagged_elements_keep_positions(self) -> None:
        actions = ["a", "b"]
        first = [PlayerAction("P1", a) for a in actions]
        second = [PlayerAction("P2", a) for a in actions]
        assert len(cartesian_product([first, second])) == 4

    def test_set_of_sets_is_single_set(self) -> None:
        """A set argument is never unpacked into factors."""
        first = frozenset({"a"})
        second = frozenset({"b"})
        product = cartesian_product(frozenset({first, second}))
        assert len(product) == 3
        assert frozenset({first, second}) in product
        assert cartesian_product((first, second)) == [frozenset({"a", "b"})]

    def test_empty_factor_gives_empty_product(self) -> None:
        assert cartesian_product([{"a"}, set()]) == []

    def test_large_enumeration_warning(self) -> None:
        _limit_enumerations(5)
        with capture_logs() as logs:
            cartesian_product([range(2), range(10, 13)])
        events = [log for log in logs if log["event"] == "large_enumeration"]
        assert events[0]["operation"] == "cartesian_product"
        assert events[0]["size"] == 6
