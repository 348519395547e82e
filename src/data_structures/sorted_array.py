from typing import Iterable, List, Optional

from ..algorithms.binary_search import binary_search
from ..algorithms.selection_sort import SortStats, selection_sort
from ..errors import AllocationFailureError


class SortedArray:
    """Keeps an unsorted copy of the input and a working copy sorted by selection sort."""

    def __init__(self, data: Iterable[int]):
        try:
            self._original: List[int] = list(data)
            self._data: List[int] = list(self._original)
        except MemoryError as e:
            raise AllocationFailureError("couldn't allocate memory for the sorted array") from e
        self._is_sorted = False
        self.stats: Optional[SortStats] = None

    def reset(self) -> None:
        """Restore the working copy to the original, unsorted order."""
        self._data[:] = self._original
        self._is_sorted = False

    def sort(self) -> SortStats:
        """Re-copy the original input and selection sort it."""
        self.reset()
        self.stats = self.sort_in_place()
        return self.stats

    def sort_in_place(self) -> SortStats:
        """Selection sort the working copy as it currently stands."""
        stats = selection_sort(self._data)
        self._is_sorted = True
        self.stats = stats
        return stats

    def search(self, value: int) -> int:
        """Binary search the sorted copy; returns the index or NOT_FOUND."""
        return binary_search(self.values, value)

    @property
    def is_sorted(self) -> bool:
        return self._is_sorted

    @property
    def original(self) -> List[int]:
        return list(self._original)

    @property
    def values(self) -> List[int]:
        """The sorted working copy. Callers must not mutate it."""
        if not self._is_sorted:
            raise RuntimeError("Must call sort() before accessing sorted data")
        return self._data

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"SortedArray(size={len(self._data)}, sorted={self._is_sorted})"
