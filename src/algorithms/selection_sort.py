from .algorithm import SortAlgorithm
from .instrumentation import ComparisonCounter


class SelectionSortByPriority(SortAlgorithm):
    """Selection sort on priority, highest first; the leftmost maximum wins ties."""

    def _sort(self, counter: ComparisonCounter) -> int:
        items = self.components
        n = len(items)
        swaps = 0

        for i in range(n - 1):
            max_index = i
            for j in range(i + 1, n):
                counter.increment()
                if items[j].priority > items[max_index].priority:
                    max_index = j
            if max_index != i:
                items[i], items[max_index] = items[max_index], items[i]
                swaps += 1

        return swaps

    def get_algorithm_name(self) -> str:
        return "Selection Sort (priority)"
