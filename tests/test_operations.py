"""
Tests for the module-level sort and search operations used by the driver.
"""

import math
import random

import pytest

from src.algorithms.algorithm import NOT_FOUND
from src.algorithms.instrumentation import Metrics
from src.algorithms.operations import (
    search_by_name,
    sort_by_name,
    sort_by_priority,
    sort_by_type,
)
from src.algorithms.ordering import compare_ci


def random_rows(rng, size):
    return [
        (
            rng.choice(["Alpha", "beta", "GAMMA", "delta", "Eps", "zeta", "Mid"])
            + str(rng.randint(0, 3)),
            rng.choice(["core", "Hull", "aft", "BOW"]),
            rng.randint(1, 10),
        )
        for _ in range(size)
    ]


class TestScenarios:
    """End-to-end scenarios over the three-component example."""

    def test_name_sort_then_search(self, scenario_collection):
        metrics = sort_by_name(scenario_collection)

        assert [c.name for c in scenario_collection] == ["Alpha", "Mid", "Zeta"]
        assert metrics.comparisons == 3
        assert metrics.elapsed >= 0

        index, comparisons = search_by_name(scenario_collection, "alpha")
        assert index == 0
        assert comparisons == 2

    def test_priority_ties_keep_original_order(self, collection_factory):
        collection = collection_factory([("a", "_", 5), ("b", "_", 9), ("c", "_", 9)])

        sort_by_priority(collection)

        assert [c.name for c in collection] == ["b", "c", "a"]

    def test_search_missing_key(self, scenario_collection):
        sort_by_name(scenario_collection)

        index, comparisons = search_by_name(scenario_collection, "omega")

        assert index == NOT_FOUND
        assert 1 <= comparisons <= 2

    def test_search_empty_key(self, scenario_collection):
        sort_by_name(scenario_collection)

        assert search_by_name(scenario_collection, "") == (NOT_FOUND, 2)

    def test_clock_is_forwarded(self, scenario_collection, fake_clock):
        metrics = sort_by_type(scenario_collection, clock=fake_clock(0.0, 0.5))
        assert metrics == Metrics(comparisons=3, elapsed=0.5)


class TestProperties:
    """Ordering properties over random collections of every size up to capacity."""

    @pytest.mark.parametrize("size", range(0, 21))
    def test_sort_by_name_orders_adjacent_pairs(self, collection_factory, size):
        collection = collection_factory(random_rows(random.Random(size), size))

        sort_by_name(collection)

        for left, right in zip(collection, list(collection)[1:]):
            assert compare_ci(left.name, right.name) <= 0

    @pytest.mark.parametrize("size", range(0, 21))
    def test_sort_by_type_orders_and_keeps_ties_stable(self, collection_factory, size):
        collection = collection_factory(random_rows(random.Random(100 + size), size))
        position = {id(c): i for i, c in enumerate(collection)}

        sort_by_type(collection)

        for left, right in zip(collection, list(collection)[1:]):
            cmp = compare_ci(left.type, right.type)
            assert cmp <= 0
            if cmp == 0:
                assert position[id(left)] < position[id(right)]

    @pytest.mark.parametrize("size", range(0, 21))
    def test_sort_by_priority_descending(self, collection_factory, size):
        collection = collection_factory(random_rows(random.Random(200 + size), size))

        sort_by_priority(collection)

        for left, right in zip(collection, list(collection)[1:]):
            assert left.priority >= right.priority

    @pytest.mark.parametrize("size", range(2, 21))
    def test_name_sort_idempotent_within_one_pass(self, collection_factory, size):
        collection = collection_factory(random_rows(random.Random(300 + size), size))
        sort_by_name(collection)
        before = list(collection)

        metrics = sort_by_name(collection)

        assert list(collection) == before
        assert metrics.comparisons <= size - 1

    @pytest.mark.parametrize("size", range(1, 21))
    def test_search_round_trip(self, collection_factory, size):
        names = [f"part{i:02d}" for i in range(size)]
        random.Random(size).shuffle(names)
        collection = collection_factory([(name, "t", 1) for name in names])
        sort_by_name(collection)

        for position, component in enumerate(collection):
            index, _ = search_by_name(collection, component.name.upper())
            assert index == position

        index, comparisons = search_by_name(collection, "part99")
        assert index == NOT_FOUND
        assert comparisons <= math.ceil(math.log2(size + 1))

    @pytest.mark.parametrize(
        "operation", [sort_by_name, sort_by_type, sort_by_priority]
    )
    @pytest.mark.parametrize("size", [0, 1])
    def test_trivial_sizes(self, collection_factory, operation, size):
        collection = collection_factory([("only", "t", 1)][:size])

        assert operation(collection) == Metrics(comparisons=0, elapsed=0.0)

    def test_search_empty(self, collection_factory):
        assert search_by_name(collection_factory([]), "x") == (NOT_FOUND, 0)

    @pytest.mark.parametrize(
        "operation", [sort_by_name, sort_by_type, sort_by_priority]
    )
    def test_sorts_accept_plain_lists(self, collection_factory, operation):
        items = list(collection_factory(random_rows(random.Random(7), 10)))

        metrics = operation(items)

        assert len(items) == 10
        assert metrics.comparisons > 0
