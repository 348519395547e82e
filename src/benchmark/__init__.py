"""
Benchmarking module for storage and retrieval strategies.

This module times a quadratic probing hash table against selection sort
plus binary search over the same integer data and reports the results.
"""

from .benchmark import (
    DEFAULT_HASH_REPETITIONS,
    DEFAULT_SORT_REPETITIONS,
    BenchmarkConfig,
    BenchmarkResult,
    BenchmarkRunner,
    HashingResult,
    SortedResult,
)
from .report import ReportFormatter

__all__ = [
    "DEFAULT_HASH_REPETITIONS",
    "DEFAULT_SORT_REPETITIONS",
    "BenchmarkConfig",
    "BenchmarkResult",
    "BenchmarkRunner",
    "HashingResult",
    "ReportFormatter",
    "SortedResult",
]
