from .algorithm import SortAlgorithm
from .instrumentation import ComparisonCounter
from .ordering import compare_ci


class BubbleSortByName(SortAlgorithm):
    """
    Bubble sort on component names, ascending and case-insensitive.

    Every adjacent comparison is counted. A pass that makes no swap ends the
    sort early, so an already ordered collection costs a single pass of n-1
    comparisons.

    Time Complexity: O(n^2) worst case, O(n) best case
    Space Complexity: O(1)
    """

    def _sort(self, counter: ComparisonCounter) -> int:
        items = self.components
        n = len(items)
        swaps = 0

        for pass_index in range(n - 1):
            swapped = False
            for i in range(n - 1 - pass_index):
                counter.increment()
                if compare_ci(items[i].name, items[i + 1].name) > 0:
                    items[i], items[i + 1] = items[i + 1], items[i]
                    swaps += 1
                    swapped = True
            if not swapped:
                break

        return swaps

    def get_algorithm_name(self) -> str:
        return "Bubble Sort (name)"
