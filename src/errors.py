"""
Error types raised by the benchmark.

Every error here is fatal to a run: the command line runners catch
BenchmarkError, print a single message naming the failing resource and
exit with a non-zero status. Hash table overflow is not an error and has
no type here.
"""


class BenchmarkError(Exception):
    """Base class for all fatal benchmark errors."""


class InputUnavailableError(BenchmarkError, OSError):
    """A data file is missing or could not be opened."""


class EmptyDatasetError(BenchmarkError, ValueError):
    """A data file was opened but yielded no integers."""


class InvalidConfigurationError(BenchmarkError, ValueError):
    """A size or repetition count is out of range."""


class AllocationFailureError(BenchmarkError, MemoryError):
    """Backing storage for a structure could not be allocated."""
