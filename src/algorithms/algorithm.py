from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import MutableSequence, Optional

from .instrumentation import Clock, ComparisonCounter, InstrumentationHarness, Metrics

NOT_FOUND = -1


@dataclass
class SearchResult:
    """
    Result of a search operation.

    Attributes:
        found: Whether the item was found
        index: Index of the item if found, NOT_FOUND (-1) otherwise
        comparisons: Number of comparisons performed
        time_taken: Time taken for the search in seconds
        additional_info: Any additional algorithm-specific information
    """

    found: bool
    index: int
    comparisons: int
    time_taken: float
    additional_info: Optional[dict] = None

    @property
    def metrics(self) -> Metrics:
        return Metrics(comparisons=self.comparisons, elapsed=self.time_taken)


@dataclass
class SortResult:
    """
    Result of an in-place sort.

    Attributes:
        comparisons: Number of comparisons performed
        time_taken: Time from the first comparison to the last swap, in seconds
        swaps: Number of element moves (swaps or shifts) performed
    """

    comparisons: int
    time_taken: float
    swaps: int = 0

    @property
    def metrics(self) -> Metrics:
        return Metrics(comparisons=self.comparisons, elapsed=self.time_taken)


class Algorithm(ABC):
    """
    Abstract base class for the instrumented component algorithms.

    Holds the component sequence the algorithm works on, the harness that
    times each run, and cumulative statistics over all runs of this instance.
    """

    def __init__(
        self,
        components: MutableSequence,
        clock: Optional[Clock] = None,
        track_performance: bool = True,
    ):
        """
        Initialize the algorithm.

        Args:
            components: Mutable sequence of components; sorts reorder it in place
            clock: Monotonic time source in seconds, defaults to time.perf_counter
            track_performance: Whether to accumulate per-instance statistics
        """
        self.components = components
        self.harness = InstrumentationHarness(clock)
        self.track_performance = track_performance
        self.total_comparisons = 0
        self.total_runs = 0
        self.total_time = 0.0

    @abstractmethod
    def get_algorithm_name(self) -> str:
        """
        Get the name of the algorithm.

        Returns:
            A string representing the algorithm name
        """
        pass

    def _update_statistics(self, comparisons: int, time_taken: float) -> None:
        if not self.track_performance:
            return
        self.total_comparisons += comparisons
        self.total_runs += 1
        self.total_time += time_taken

    def get_performance_stats(self) -> dict:
        """
        Get performance statistics for all runs performed.

        Returns:
            Dictionary containing performance metrics
        """
        if self.total_runs == 0:
            return {
                "total_runs": 0,
                "total_comparisons": 0,
                "total_time": 0.0,
                "avg_comparisons": 0.0,
                "avg_time": 0.0,
            }

        return {
            "total_runs": self.total_runs,
            "total_comparisons": self.total_comparisons,
            "total_time": self.total_time,
            "avg_comparisons": self.total_comparisons / self.total_runs,
            "avg_time": self.total_time / self.total_runs,
        }

    def reset_statistics(self) -> None:
        """Reset all performance statistics."""
        self.total_comparisons = 0
        self.total_runs = 0
        self.total_time = 0.0

    def __str__(self) -> str:
        """String representation of the algorithm."""
        return f"{self.get_algorithm_name()}"


class SortAlgorithm(Algorithm):
    """
    Base class for the in-place sorts.

    Subclasses implement _sort, which reorders self.components, increments
    the counter once per comparison and returns the number of moves.
    """

    def sort(self) -> SortResult:
        """Sort the components in place and report comparisons and elapsed time."""
        if len(self.components) < 2:
            self._update_statistics(0, 0.0)
            return SortResult(comparisons=0, time_taken=0.0)

        swaps, metrics = self.harness.measure(self._sort)
        self._update_statistics(metrics.comparisons, metrics.elapsed)

        return SortResult(
            comparisons=metrics.comparisons, time_taken=metrics.elapsed, swaps=swaps
        )

    @abstractmethod
    def _sort(self, counter: ComparisonCounter) -> int:
        pass
