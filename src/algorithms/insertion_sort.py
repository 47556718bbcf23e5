from .algorithm import SortAlgorithm
from .instrumentation import ComparisonCounter
from .ordering import compare_ci


class InsertionSortByType(SortAlgorithm):
    """
    Insertion sort on component types, ascending and case-insensitive.

    Elements shift right only while strictly greater than the key, which
    keeps equal types in their original order. The comparison that stops a
    shift is counted too.
    """

    def _sort(self, counter: ComparisonCounter) -> int:
        items = self.components
        shifts = 0

        for i in range(1, len(items)):
            key = items[i]
            j = i - 1
            while j >= 0:
                counter.increment()
                if compare_ci(items[j].type, key.type) <= 0:
                    break
                items[j + 1] = items[j]
                shifts += 1
                j -= 1
            items[j + 1] = key

        return shifts

    def get_algorithm_name(self) -> str:
        return "Insertion Sort (type)"
