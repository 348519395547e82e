from dataclasses import dataclass
from typing import List


@dataclass
class SortStats:
    """Counters collected by one selection sort pass."""

    comparisons: int = 0
    swaps: int = 0


def selection_sort(data: List[int]) -> SortStats:
    """
    Sort data in place, ascending, and count the work done.

    Every element scanned for the minimum counts as one comparison. A swap is
    counted only when the minimum is not already at the front of the unsorted
    part.
    """
    stats = SortStats()
    size = len(data)

    for i in range(size - 1):
        smallest = data[i]
        smallest_index = i
        for j in range(i + 1, size):
            if data[j] < smallest:
                smallest = data[j]
                smallest_index = j
            stats.comparisons += 1

        if smallest_index != i:
            data[i], data[smallest_index] = data[smallest_index], data[i]
            stats.swaps += 1

    return stats
