import time
from typing import Iterator

from ..algorithms.algorithm import Algorithm, SearchResult
from ..data_structures.entries import NOT_FOUND


def probe_sequence(key: int, capacity: int) -> Iterator[int]:
    """
    Yield the quadratic probe indices (key + i*i) % capacity for i < capacity.

    On a table whose size is not prime the sequence revisits slots and may
    never reach some of them.
    """
    for i in range(capacity):
        yield (key + i * i) % capacity


class QuadraticProbeSearch(Algorithm):
    """Lookup in a quadratic probing hash table."""

    def __init__(self, table):
        self.table = table
        super().__init__(table)

    def search(self, target: int) -> SearchResult:
        """Search for target following the same probe sequence as insertion."""
        if not self.validate_target(target):
            return SearchResult(found=False, index=-1, comparisons=0, time_taken=0.0)

        start_time = time.perf_counter()
        result_index, probes = self.table.lookup_with_probes(target)
        end_time = time.perf_counter()

        return SearchResult(
            found=result_index != NOT_FOUND,
            index=result_index,
            comparisons=probes,
            time_taken=end_time - start_time,
            hash_operations=probes,
        )

    def get_algorithm_name(self) -> str:
        return "Quadratic Probing"
