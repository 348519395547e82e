"""
Tests for ProbingTable.

Tests cover quadratic probing insertion, collision trails, lookup, silent
overflow and rebuild semantics.
"""

import random

import pytest

from src.algorithms.quadratic_probing import probe_sequence
from src.data_structures.entries import (
    NOT_FOUND,
    InputEntry,
    SearchEntry,
    make_input_entries,
)
from src.data_structures.probing_table import InsertOutcome, ProbingTable
from src.errors import AllocationFailureError, InvalidConfigurationError


class TestProbingTable:
    """Test suite for ProbingTable class."""

    def setup_method(self):
        """Set up the capacity 7 walkthrough table."""
        self.entries = make_input_entries([3, 10, 17])
        self.table = ProbingTable.build(7, self.entries)

    def test_init_basic(self):
        """Test a new table is empty."""
        table = ProbingTable(5)

        assert table.capacity == 5
        assert table.occupied == 0
        assert len(table) == 0
        assert table.slots == (None,) * 5

    @pytest.mark.parametrize("capacity", [0, -1, -100])
    def test_init_non_positive_capacity(self, capacity):
        """Test non-positive capacities are rejected."""
        with pytest.raises(InvalidConfigurationError, match="greater than 0"):
            ProbingTable(capacity)

    @pytest.mark.parametrize("capacity", ["7", 7.0, True, None])
    def test_init_non_integer_capacity(self, capacity):
        """Test non-integer capacities are rejected."""
        with pytest.raises(InvalidConfigurationError):
            ProbingTable(capacity)

    def test_invalid_configuration_is_value_error(self):
        """Test the configuration error can be caught as ValueError."""
        with pytest.raises(ValueError):
            ProbingTable(0)

    def test_allocation_failure(self):
        """Test an impossible slot array is reported as AllocationFailureError."""
        with pytest.raises(AllocationFailureError):
            ProbingTable(2**62)

        assert issubclass(AllocationFailureError, MemoryError)

    def test_walkthrough_slots(self):
        """Test keys 3, 10, 17 land in slots 3, 4 and 0."""
        assert self.table.slots == (17, None, None, 3, 10, None, None)
        assert self.table.occupied == 3

    def test_walkthrough_collision_trails(self):
        """Test the collision trail of every walkthrough key."""
        assert self.entries[0].collisions == []
        assert self.entries[1].collisions == [3]
        assert self.entries[2].collisions == [3, 4]
        assert [e.num_collisions for e in self.entries] == [0, 1, 2]

    def test_insert_returns_outcome(self):
        """Test insert reports the slot and collisions."""
        table = ProbingTable(7)
        table.insert(3)

        outcome = table.insert(10)

        assert isinstance(outcome, InsertOutcome)
        assert outcome.slot == 4
        assert outcome.collisions == [3]
        assert outcome.inserted is True

    def test_insert_entry_replaces_previous_trail(self):
        """Test insert_entry resets the collision trail before probing."""
        table = ProbingTable(7)
        entry = InputEntry(3, collisions=[99, 98])

        slot = table.insert_entry(entry)

        assert slot == 3
        assert entry.collisions == []

    def test_overflow_is_silent(self):
        """Test a key that finds no free slot is dropped without an error."""
        entries = make_input_entries([0, 2, 4])

        table = ProbingTable.build(2, entries)

        assert table.occupied == 2
        assert table.slots == (0, 2)
        assert entries[2].collisions == [0, 1]
        assert entries[2].num_collisions == table.capacity
        assert table.lookup(4) == NOT_FOUND

    def test_overflow_outcome(self):
        """Test a failed insert reports NOT_FOUND and a full-length trail."""
        table = ProbingTable.build(2, make_input_entries([0, 2]))

        outcome = table.insert(4)

        assert outcome.slot == NOT_FOUND
        assert outcome.inserted is False
        assert len(outcome.collisions) == 2

    def test_probe_sequence_does_not_cover_every_slot(self):
        """Test a non-prime table can reject a key while slots are still free."""
        entries = make_input_entries([0, 4, 8])

        table = ProbingTable.build(4, entries)

        assert table.occupied == 2
        assert table.slots == (0, 4, None, None)
        assert entries[2].collisions == [0, 1, 0, 1]

    def test_negative_keys_use_non_negative_slots(self):
        """Test negative keys are placed by Python's modulo."""
        table = ProbingTable(7)

        outcome = table.insert(-1)

        assert outcome.slot == 6
        assert table.lookup(-1) == 6

    def test_duplicate_keys_take_separate_slots(self):
        """Test inserting the same key twice stores it twice."""
        entries = make_input_entries([5, 5])

        table = ProbingTable.build(7, entries)

        assert table.occupied == 2
        assert entries[1].collisions == [5]
        assert table.lookup(5) == 5

    def test_lookup_found(self):
        """Test lookup returns the slot chosen during insertion."""
        assert self.table.lookup(3) == 3
        assert self.table.lookup(10) == 4
        assert self.table.lookup(17) == 0

    def test_lookup_stops_at_empty_slot(self):
        """Test lookup ends at the first empty slot of the probe sequence."""
        table = ProbingTable.build(7, make_input_entries([3]))

        index, probes = table.lookup_with_probes(10)

        assert index == NOT_FOUND
        assert probes == 2

    def test_lookup_does_not_mutate(self):
        """Test lookups leave the table untouched."""
        before = self.table.slots

        for key in [1, 2, 24, 31, 3, 10]:
            self.table.lookup(key)

        assert self.table.slots == before
        assert self.table.occupied == 3

    def test_lookup_full_table_exhausts_probes(self):
        """Test a missing key in a full table is NOT_FOUND after capacity probes."""
        table = ProbingTable.build(2, make_input_entries([0, 1]))

        index, probes = table.lookup_with_probes(2)

        assert index == NOT_FOUND
        assert probes == 2

    def test_search_entry_records_index(self):
        """Test search_entry stores the lookup result on the entry."""
        found = SearchEntry(10)
        missing = SearchEntry(11)

        assert self.table.search_entry(found) == 4
        assert self.table.search_entry(missing) == NOT_FOUND
        assert found.index == 4 and found.found
        assert missing.index == NOT_FOUND and not missing.found

    def test_search_entry_overwrites_previous_index(self):
        """Test a stale index from an earlier lookup is overwritten."""
        entry = SearchEntry(11, index=2)

        self.table.search_entry(entry)

        assert entry.index == NOT_FOUND

    def test_rebuild_is_not_additive(self):
        """Test rebuilding with the same entries gives the same state."""
        slots = self.table.slots

        self.table.rebuild(self.entries)
        self.table.rebuild(self.entries)

        assert self.table.occupied == 3
        assert self.table.slots == slots
        assert self.entries[2].collisions == [3, 4]

    def test_rebuild_clears_old_keys(self):
        """Test rebuilding with different entries drops previous keys."""
        self.table.rebuild(make_input_entries([1]))

        assert self.table.occupied == 1
        assert 3 not in self.table
        assert 1 in self.table

    def test_fill_percentage(self):
        """Test the fill percentage is occupied / capacity * 100."""
        assert self.table.fill_percentage == pytest.approx(300 / 7)

    def test_keys(self):
        """Test keys lists stored keys in slot order."""
        assert self.table.keys() == [17, 3, 10]

    def test_repr(self):
        """Test repr shows capacity and occupancy."""
        assert repr(self.table) == "ProbingTable(capacity=7, occupied=3)"


class TestProbingTableProperties:
    """Randomised checks of lookup and collision trail invariants."""

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_lookup_matches_insert_slot(self, seed):
        """Test every inserted key is found at the slot reported by insert."""
        rng = random.Random(seed)
        keys = rng.sample(range(10_000), 50)
        table = ProbingTable(101)  # prime, load factor below one half

        slots = {key: table.insert(key).slot for key in keys}

        assert table.occupied == len(keys)
        for key, slot in slots.items():
            assert slot != NOT_FOUND
            assert table.lookup(key) == slot

    @pytest.mark.parametrize("seed", [10, 11, 12])
    def test_absent_keys_not_found(self, seed):
        """Test keys never inserted are NOT_FOUND."""
        rng = random.Random(seed)
        keys = rng.sample(range(1000), 30)
        table = ProbingTable.build(61, make_input_entries(keys))

        for key in range(1000, 1100):
            assert table.lookup(key) == NOT_FOUND

    @pytest.mark.parametrize("seed", [20, 21, 22])
    def test_collision_trail_replays(self, seed):
        """Test each trail lists exactly the occupied probes before the free slot."""
        rng = random.Random(seed)
        capacity = 16  # not prime, so some keys overflow
        entries = make_input_entries(rng.randint(0, 200) for _ in range(20))
        table = ProbingTable(capacity)
        expected_slots = [None] * capacity

        for entry in entries:
            expected_trail = []
            expected_slot = NOT_FOUND
            for index in probe_sequence(entry.key, capacity):
                if expected_slots[index] is None:
                    expected_slots[index] = entry.key
                    expected_slot = index
                    break
                expected_trail.append(index)

            assert table.insert_entry(entry) == expected_slot
            assert entry.collisions == expected_trail

        assert list(table.slots) == expected_slots
        assert table.occupied == sum(slot is not None for slot in expected_slots)
        assert table.occupied <= capacity
