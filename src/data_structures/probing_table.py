# Fixed-capacity integer hash table with quadratic probing.
# No resizing, no deletion, no tombstones. A key whose probe sequence only
# meets occupied slots is dropped silently and shows up only as a smaller
# occupied count.

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from ..algorithms.quadratic_probing import probe_sequence
from ..errors import AllocationFailureError, InvalidConfigurationError
from .entries import NOT_FOUND, InputEntry, SearchEntry


@dataclass
class InsertOutcome:
    """Slot where a key landed (NOT_FOUND on overflow) and its collision trail."""

    slot: int
    collisions: List[int] = field(default_factory=list)

    @property
    def inserted(self) -> bool:
        return self.slot != NOT_FOUND


class ProbingTable:
    def __init__(self, capacity: int):
        """
        capacity: number of slots, must be a positive integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidConfigurationError(
                f"hash table size must be an integer, got {capacity!r}"
            )
        if capacity <= 0:
            raise InvalidConfigurationError("hash table size must be greater than 0!")

        self.capacity = capacity
        try:
            self._slots: List[Optional[int]] = [None] * capacity
        except MemoryError as e:
            raise AllocationFailureError(
                f"couldn't allocate memory for {capacity:,} hash table slots"
            ) from e
        self.occupied = 0

    @classmethod
    def build(cls, capacity: int, entries: Iterable[InputEntry]) -> "ProbingTable":
        """Create a table and insert every entry in order."""
        table = cls(capacity)
        table.rebuild(entries)
        return table

    def clear(self) -> None:
        for i in range(self.capacity):
            self._slots[i] = None
        self.occupied = 0

    def rebuild(self, entries: Iterable[InputEntry]) -> None:
        """Empty the table, then insert each entry, recording its collisions."""
        self.clear()
        for entry in entries:
            self.insert_entry(entry)

    def insert(self, key: int) -> InsertOutcome:
        """
        Place key in the first empty slot of its probe sequence.

        Returns the slot and the indices of the occupied slots probed before
        it. When every probe hits an occupied slot the key is not stored and
        the outcome's slot is NOT_FOUND; this is not an error.
        """
        collisions: List[int] = []
        for index in probe_sequence(key, self.capacity):
            if self._slots[index] is None:
                self._slots[index] = key
                self.occupied += 1
                return InsertOutcome(index, collisions)
            collisions.append(index)
        return InsertOutcome(NOT_FOUND, collisions)

    def insert_entry(self, entry: InputEntry) -> int:
        """Insert entry.key, replacing the entry's collision trail."""
        outcome = self.insert(entry.key)
        entry.collisions = outcome.collisions
        return outcome.slot

    def lookup_with_probes(self, key: int) -> Tuple[int, int]:
        """Return (slot index or NOT_FOUND, number of slots probed)."""
        probes = 0
        for index in probe_sequence(key, self.capacity):
            probes += 1
            slot = self._slots[index]
            if slot is None:
                # nothing is ever deleted, so an empty slot ends the chain
                return NOT_FOUND, probes
            if slot == key:
                return index, probes
        return NOT_FOUND, probes

    def lookup(self, key: int) -> int:
        return self.lookup_with_probes(key)[0]

    def search_entry(self, entry: SearchEntry) -> int:
        entry.index = self.lookup(entry.key)
        return entry.index

    @property
    def slots(self) -> Tuple[Optional[int], ...]:
        return tuple(self._slots)

    @property
    def fill_percentage(self) -> float:
        return self.occupied * 100.0 / self.capacity

    def keys(self) -> List[int]:
        return [slot for slot in self._slots if slot is not None]

    def __len__(self) -> int:
        return self.occupied

    def __contains__(self, key: int) -> bool:
        return self.lookup(key) != NOT_FOUND

    def __repr__(self) -> str:
        return f"ProbingTable(capacity={self.capacity}, occupied={self.occupied})"
