import time
from typing import TYPE_CHECKING, Sequence, Tuple

from ..algorithms.algorithm import Algorithm, SearchResult
from ..data_structures.entries import NOT_FOUND

if TYPE_CHECKING:
    from ..data_structures.sorted_array import SortedArray


def binary_search_with_comparisons(
    sorted_data: Sequence[int], value: int
) -> Tuple[int, int]:
    """Return (index of value or NOT_FOUND, number of midpoints inspected)."""
    left, right = 0, len(sorted_data) - 1
    comparisons = 0

    while left <= right:
        middle = (left + right) // 2
        comparisons += 1
        if sorted_data[middle] < value:
            left = middle + 1
        elif sorted_data[middle] > value:
            right = middle - 1
        else:
            return middle, comparisons

    return NOT_FOUND, comparisons


def binary_search(sorted_data: Sequence[int], value: int) -> int:
    """Return an index of value in ascending sorted_data, or NOT_FOUND."""
    return binary_search_with_comparisons(sorted_data, value)[0]


class BinarySearch(Algorithm):
    """Binary search on a sorted integer array."""

    def __init__(self, sorted_array: "SortedArray"):
        self.sorted_array = sorted_array
        super().__init__(sorted_array)

    def search(self, target: int) -> SearchResult:
        """Search for target in the sorted copy, counting inspected midpoints."""
        if not self.validate_target(target):
            return SearchResult(found=False, index=-1, comparisons=0, time_taken=0.0)

        data = self.sorted_array.values
        start_time = time.perf_counter()
        result_index, comparisons = binary_search_with_comparisons(data, target)
        end_time = time.perf_counter()

        return SearchResult(
            found=result_index != NOT_FOUND,
            index=result_index,
            comparisons=comparisons,
            time_taken=end_time - start_time,
        )

    def get_algorithm_name(self) -> str:
        return "Binary Search"
