from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class SearchResult:
    """
    Result of a search operation.

    Attributes:
        found: Whether the key was found
        index: Slot or array index of the key if found, -1 otherwise
        comparisons: Number of element comparisons (or probes) performed
        time_taken: Time taken for the search in seconds
        hash_operations: Number of hash index computations (hash-based algorithms)
    """

    found: bool
    index: int
    comparisons: int
    time_taken: float
    hash_operations: int = 0


class Algorithm(ABC):
    """
    Abstract base class for search algorithms.

    This class defines the interface that all search algorithms must implement
    to look up an integer key in the structure they wrap.
    """

    def __init__(self, structure):
        """
        Initialize the algorithm with the structure it searches.

        Args:
            structure: The populated data structure (hash table or sorted array).
        """
        self.structure = structure

    @abstractmethod
    def search(self, target: int) -> SearchResult:
        """
        Search for the target key.

        Args:
            target: The integer key to search for

        Returns:
            A SearchResult object containing the search outcome
        """
        pass

    @abstractmethod
    def get_algorithm_name(self) -> str:
        """
        Get the name of the algorithm.

        Returns:
            A string representing the algorithm name
        """
        pass

    def validate_target(self, target: int) -> bool:
        """
        Validate that the target is an integer key.

        Booleans are rejected even though they subclass int.
        """
        return isinstance(target, int) and not isinstance(target, bool)

    def __str__(self) -> str:
        """String representation of the algorithm."""
        return f"{self.get_algorithm_name()}"
