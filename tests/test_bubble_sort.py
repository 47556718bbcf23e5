"""
Tests for BubbleSortByName.

Tests cover ordering, the early-exit comparison count, stability and edge cases.
"""

import random

import pytest

from src.algorithms.algorithm import SortResult
from src.algorithms.bubble_sort import BubbleSortByName
from src.algorithms.ordering import compare_ci


def names(collection):
    return [component.name for component in collection]


class TestBubbleSortByName:
    """Test suite for BubbleSortByName."""

    def test_scenario_three_components(self, scenario_collection):
        """Two passes: 2 comparisons with swaps, then 1 comparison and early exit."""
        result = BubbleSortByName(scenario_collection).sort()

        assert names(scenario_collection) == ["Alpha", "Mid", "Zeta"]
        assert result.comparisons == 3
        assert result.swaps == 2

    def test_case_insensitive(self, collection_factory):
        collection = collection_factory(
            [("bravo", "t", 1), ("ALPHA", "t", 1), ("Charlie", "t", 1), ("alpha2", "t", 1)]
        )

        BubbleSortByName(collection).sort()

        assert names(collection) == ["ALPHA", "alpha2", "bravo", "Charlie"]

    def test_already_sorted_costs_one_pass(self, collection_factory):
        collection = collection_factory([(name, "t", 1) for name in "abcdef"])

        result = BubbleSortByName(collection).sort()

        assert result.comparisons == len(collection) - 1
        assert result.swaps == 0

    def test_reverse_sorted_worst_case(self, collection_factory):
        collection = collection_factory([(name, "t", 1) for name in "fedcba"])
        n = len(collection)

        result = BubbleSortByName(collection).sort()

        assert names(collection) == list("abcdef")
        assert result.comparisons == n * (n - 1) // 2

    def test_stable_for_equal_names(self, collection_factory):
        collection = collection_factory(
            [("beta", "first", 1), ("Alpha", "x", 1), ("BETA", "second", 1)]
        )

        BubbleSortByName(collection).sort()

        assert [c.type for c in collection] == ["x", "first", "second"]

    def test_idempotent(self, scenario_collection):
        BubbleSortByName(scenario_collection).sort()
        before = list(scenario_collection)

        result = BubbleSortByName(scenario_collection).sort()

        assert list(scenario_collection) == before
        assert result.comparisons <= len(scenario_collection) - 1

    @pytest.mark.parametrize("rows", [[], [("Solo", "t", 1)]])
    def test_trivial_sizes(self, collection_factory, rows):
        collection = collection_factory(rows)

        result = BubbleSortByName(collection).sort()

        assert result == SortResult(comparisons=0, time_taken=0.0)
        assert names(collection) == [r[0] for r in rows]

    def test_injected_clock(self, scenario_collection, fake_clock):
        result = BubbleSortByName(scenario_collection, clock=fake_clock(3.0, 3.5)).sort()
        assert result.time_taken == pytest.approx(0.5)

    @pytest.mark.parametrize("seed", range(10))
    def test_matches_reference_count(self, collection_factory, reference_bubble_comparisons, seed):
        rng = random.Random(seed)
        rows = [
            ("".join(rng.choice("aAbBcC") for _ in range(rng.randint(1, 3))), "t", 1)
            for _ in range(rng.randint(0, 20))
        ]
        collection = collection_factory(rows)
        expected = reference_bubble_comparisons([r[0] for r in rows])

        result = BubbleSortByName(collection).sort()

        assert result.comparisons == expected
        for left, right in zip(collection, list(collection)[1:]):
            assert compare_ci(left.name, right.name) <= 0

    def test_get_algorithm_name(self):
        assert BubbleSortByName([]).get_algorithm_name() == "Bubble Sort (name)"
