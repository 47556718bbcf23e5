from .algorithm import NOT_FOUND, Algorithm, SearchResult
from .instrumentation import ComparisonCounter
from .ordering import compare_ci


class BinarySearchByName(Algorithm):
    """
    Binary search on component names, case-insensitive.

    The components must already be sorted ascending by name. This is not
    checked; on unsorted input the result is unspecified.
    """

    def search(self, target: str) -> SearchResult:
        """Search for target using binary search."""
        if not self.validate_target(target) or len(self.components) == 0:
            self._update_statistics(0, 0.0)
            return SearchResult(found=False, index=NOT_FOUND, comparisons=0, time_taken=0.0)

        result_index, metrics = self.harness.measure(
            lambda counter: self._bisect(target, counter)
        )
        self._update_statistics(metrics.comparisons, metrics.elapsed)

        return SearchResult(
            found=result_index != NOT_FOUND,
            index=result_index,
            comparisons=metrics.comparisons,
            time_taken=metrics.elapsed,
        )

    def _bisect(self, target: str, counter: ComparisonCounter) -> int:
        left, right = 0, len(self.components) - 1

        while left <= right:
            mid = left + (right - left) // 2
            counter.increment()

            cmp = compare_ci(self.components[mid].name, target)
            if cmp == 0:
                return mid
            elif cmp < 0:
                left = mid + 1
            else:
                right = mid - 1

        return NOT_FOUND

    def validate_target(self, target: str) -> bool:
        """
        Validate that the target is a string.

        An empty string is a valid key; it still walks the search path and
        is reported as not found.
        """
        return isinstance(target, str)

    def get_algorithm_name(self) -> str:
        return "Binary Search (name)"
