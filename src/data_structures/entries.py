from dataclasses import dataclass, field
from typing import Iterable, List

NOT_FOUND = -1


@dataclass
class InputEntry:
    """
    A key stored in the hash table together with its collision trail.

    Attributes:
        key: The integer value to store
        collisions: Slot indices found occupied while inserting the key,
            in probe order. Cleared at the start of every insertion.
    """

    key: int
    collisions: List[int] = field(default_factory=list)

    @property
    def num_collisions(self) -> int:
        return len(self.collisions)


@dataclass
class SearchEntry:
    """
    A key to look up and the position where it was last found.

    Attributes:
        key: The integer value to search for
        index: Slot or array index of the last successful lookup,
            NOT_FOUND otherwise
    """

    key: int
    index: int = NOT_FOUND

    @property
    def found(self) -> bool:
        return self.index != NOT_FOUND


def make_input_entries(keys: Iterable[int]) -> List[InputEntry]:
    return [InputEntry(key) for key in keys]


def make_search_entries(keys: Iterable[int]) -> List[SearchEntry]:
    return [SearchEntry(key) for key in keys]
