"""
Driver actions over a Session.

Every action takes the current session and returns the (possibly updated)
session together with its outcome. Actions that need components return a
None outcome when the collection is empty.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from ..algorithms.algorithm import NOT_FOUND
from ..algorithms.binary_search import BinarySearchByName
from ..algorithms.instrumentation import Clock, Metrics
from ..algorithms.operations import sort_by_name, sort_by_priority, sort_by_type
from ..data_structures.component import MAX_NAME_LENGTH, Component
from .session import Session


@dataclass
class SearchOutcome:
    """
    What a binary search action produced.

    Attributes:
        key: The name searched for
        index: Position of the match, NOT_FOUND (-1) otherwise
        component: The matching component, if any
        metrics: Comparisons and elapsed time of the search itself
        corrective_sort: Metrics of the name sort run first, if one was needed
    """

    key: str
    index: int
    component: Optional[Component]
    metrics: Metrics
    corrective_sort: Optional[Metrics] = None

    @property
    def found(self) -> bool:
        return self.index != NOT_FOUND


def register(session: Session, entries: Iterable[Component]) -> Tuple[Session, int]:
    """Replace the session's components with entries, keeping at most capacity."""
    session.collection.clear()
    added = session.collection.extend_clamped(entries)
    return replace(session, sorted_by_name=False), added


def sort_name(
    session: Session, clock: Optional[Clock] = None
) -> Tuple[Session, Optional[Metrics]]:
    if session.is_empty:
        return session, None
    metrics = sort_by_name(session.collection, clock=clock)
    return replace(session, sorted_by_name=True), metrics


def sort_type(
    session: Session, clock: Optional[Clock] = None
) -> Tuple[Session, Optional[Metrics]]:
    if session.is_empty:
        return session, None
    metrics = sort_by_type(session.collection, clock=clock)
    return replace(session, sorted_by_name=False), metrics


def sort_priority(
    session: Session, clock: Optional[Clock] = None
) -> Tuple[Session, Optional[Metrics]]:
    if session.is_empty:
        return session, None
    metrics = sort_by_priority(session.collection, clock=clock)
    return replace(session, sorted_by_name=False), metrics


def search(
    session: Session,
    key: str,
    auto_sort: bool = False,
    clock: Optional[Clock] = None,
) -> Tuple[Session, Optional[SearchOutcome]]:
    """
    Binary search the session's components by name.

    When the components are not known to be sorted by name, the search is
    refused unless auto_sort is set, in which case a name sort runs first.
    The key is cut to the same length registration allows for names.
    """
    if session.is_empty:
        return session, None

    corrective_sort = None
    if not session.sorted_by_name:
        if not auto_sort:
            return session, None
        session, corrective_sort = sort_name(session, clock=clock)

    key = key[:MAX_NAME_LENGTH]

    result = BinarySearchByName(
        session.collection, clock=clock, track_performance=False
    ).search(key)
    component = session.collection[result.index] if result.found else None

    return session, SearchOutcome(
        key=key,
        index=result.index,
        component=component,
        metrics=result.metrics,
        corrective_sort=corrective_sort,
    )
