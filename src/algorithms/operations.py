"""
Entry points used by the driver: one call per sort or search.

Each call builds a fresh algorithm instance, so no reference to the
collection outlives the call.
"""

from typing import MutableSequence, Optional, Sequence, Tuple

from .binary_search import BinarySearchByName
from .bubble_sort import BubbleSortByName
from .insertion_sort import InsertionSortByType
from .instrumentation import Clock, Metrics
from .selection_sort import SelectionSortByPriority


def sort_by_name(collection: MutableSequence, clock: Optional[Clock] = None) -> Metrics:
    """Bubble sort the collection by name, ascending, ignoring ASCII case."""
    algorithm = BubbleSortByName(collection, clock=clock, track_performance=False)
    return algorithm.sort().metrics


def sort_by_type(collection: MutableSequence, clock: Optional[Clock] = None) -> Metrics:
    """Insertion sort the collection by type, ascending, ignoring ASCII case."""
    algorithm = InsertionSortByType(collection, clock=clock, track_performance=False)
    return algorithm.sort().metrics


def sort_by_priority(
    collection: MutableSequence, clock: Optional[Clock] = None
) -> Metrics:
    """Selection sort the collection by priority, highest first."""
    algorithm = SelectionSortByPriority(
        collection, clock=clock, track_performance=False
    )
    return algorithm.sort().metrics


def search_by_name(
    collection: Sequence, key: str, clock: Optional[Clock] = None
) -> Tuple[int, int]:
    """
    Binary search a name-sorted collection.

    Returns:
        (index, comparisons), index being NOT_FOUND (-1) when absent
    """
    algorithm = BinarySearchByName(collection, clock=clock, track_performance=False)
    result = algorithm.search(key)
    return result.index, result.comparisons
