import os
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

import matplotlib.pyplot as plt
import psutil

from ..algorithms.algorithm import Algorithm
from ..algorithms.binary_search import BinarySearch
from ..algorithms.quadratic_probing import QuadraticProbeSearch
from ..algorithms.selection_sort import SortStats
from ..data_structures.entries import InputEntry, SearchEntry
from ..data_structures.probing_table import ProbingTable
from ..data_structures.sorted_array import SortedArray
from ..errors import InvalidConfigurationError

# Scaled down from the historical 1,000,000 (hashing) and 100,000 (sorting)
# repetitions; the 10:1 ratio is kept.
DEFAULT_HASH_REPETITIONS = 1000
DEFAULT_SORT_REPETITIONS = 100

HASHING = "hashing"
SORTED = "sorted"

METHOD_NAMES = {
    HASHING: "Hashing",
    SORTED: "Directed search of sorted data",
}


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run"""

    store_repetitions: int
    search_repetitions: int
    warmup_runs: int = 0
    measure_memory: bool = True
    verbose: bool = True
    plot_name: str = "storage-retrieval"

    def __post_init__(self):
        if self.store_repetitions <= 0:
            raise InvalidConfigurationError("store repetitions must be greater than 0!")
        if self.search_repetitions <= 0:
            raise InvalidConfigurationError("search repetitions must be greater than 0!")
        if self.warmup_runs < 0:
            raise InvalidConfigurationError("warmup runs must not be negative!")


@dataclass
class BenchmarkResult:
    """Timings and lookup outcomes of one storage method"""

    method: str
    store_time_ms: float
    search_time_ms: float
    searches: List[SearchEntry]
    num_found: int
    memory_usage: Optional[float]

    @property
    def num_searched(self) -> int:
        return len(self.searches)

    @property
    def method_name(self) -> str:
        return METHOD_NAMES.get(self.method, self.method)


@dataclass
class HashingResult(BenchmarkResult):
    table: ProbingTable
    entries: List[InputEntry]

    @property
    def num_stored(self) -> int:
        return self.table.occupied

    @property
    def structure_size(self) -> int:
        return self.table.capacity

    @property
    def total_collisions(self) -> int:
        return sum(entry.num_collisions for entry in self.entries)


@dataclass
class SortedResult(BenchmarkResult):
    array: SortedArray
    sort_stats: SortStats

    @property
    def num_stored(self) -> int:
        return len(self.array)

    @property
    def structure_size(self) -> int:
        return len(self.array)


class BenchmarkRunner:
    """Times the store and search phases of each storage method"""

    def __init__(self, config: BenchmarkConfig):
        self.config = config
        self.results: Dict[str, BenchmarkResult] = {}

    def _log(self, message: str, **kwargs) -> None:
        if self.config.verbose:
            print(message, **kwargs)

    def run_hashing(
        self,
        entries: Sequence[InputEntry],
        searches: Sequence[SearchEntry],
        capacity: int,
    ) -> HashingResult:
        """
        Benchmark the quadratic probing hash table.

        The store timer wraps the whole repetition loop, so the store time is
        the cost of one full rebuild (clearing included). Every repetition
        starts from an empty table.
        """
        table = ProbingTable(capacity)
        reps = self.config.store_repetitions

        self._log(
            f"Building hash table of size {capacity:,} from {len(entries):,} keys "
            f"x{reps:,}",
            end="",
            flush=True,
        )
        for _ in range(self.config.warmup_runs):
            table.rebuild(entries)

        start = time.perf_counter()
        for _ in range(reps):
            table.rebuild(entries)
        total = time.perf_counter() - start
        store_time_ms = total * 1000 / reps
        self._log(f" [{total:.1f}s]")

        search_time_ms, num_found = self._time_searches(
            QuadraticProbeSearch(table), searches
        )

        result = HashingResult(
            method=HASHING,
            store_time_ms=store_time_ms,
            search_time_ms=search_time_ms,
            searches=list(searches),
            num_found=num_found,
            memory_usage=self._memory_usage(),
            table=table,
            entries=list(entries),
        )
        self.results[HASHING] = result
        return result

    def run_sorted(
        self, data: Sequence[int], searches: Sequence[SearchEntry]
    ) -> SortedResult:
        """
        Benchmark selection sort followed by binary search.

        Each repetition restores the unsorted input before sorting, outside
        the timer, so no repetition sorts already sorted data.
        """
        array = SortedArray(data)
        reps = self.config.store_repetitions

        self._log(f"Sorting {len(array):,} keys x{reps:,}", end="", flush=True)
        for _ in range(self.config.warmup_runs):
            array.sort()

        total = 0.0
        stats = SortStats()
        for _ in range(reps):
            array.reset()
            start = time.perf_counter()
            stats = array.sort_in_place()
            total += time.perf_counter() - start
        store_time_ms = total * 1000 / reps
        self._log(f" [{total:.1f}s]")

        search_time_ms, num_found = self._time_searches(BinarySearch(array), searches)

        result = SortedResult(
            method=SORTED,
            store_time_ms=store_time_ms,
            search_time_ms=search_time_ms,
            searches=list(searches),
            num_found=num_found,
            memory_usage=self._memory_usage(),
            array=array,
            sort_stats=stats,
        )
        self.results[SORTED] = result
        return result

    def _time_searches(
        self, algorithm: Algorithm, searches: Sequence[SearchEntry]
    ) -> Tuple[float, int]:
        """
        Look up every search key search_repetitions times.

        Only the lookups themselves are timed. Returns the average time per
        key in milliseconds and the found count of the last repetition.
        """
        reps = self.config.search_repetitions
        self._log(
            f"Searching {len(searches):,} keys with {algorithm} x{reps:,}",
            end="",
            flush=True,
        )

        total = 0.0
        num_found = 0
        wall_start = time.time()
        for _ in range(reps):
            num_found = 0
            for entry in searches:
                result = algorithm.search(entry.key)
                entry.index = result.index
                if result.found:
                    num_found += 1
                total += result.time_taken
        self._log(f" [{time.time() - wall_start:.1f}s]")

        if not searches:
            return 0.0, 0
        return total * 1000 / (reps * len(searches)), num_found

    def _memory_usage(self) -> Optional[float]:
        if not self.config.measure_memory:
            return None
        process = psutil.Process(os.getpid())
        return process.memory_info().rss / 1024 / 1024  # MB

    def print_data(self) -> None:
        """Print a side by side summary of the collected results"""
        print(f"\n{self.config.plot_name} Benchmark Results")
        print(f"Generated at {datetime.now().strftime('%H:%M:%S')}")
        print("=" * 80)

        header = (
            f"{'Method':<32} {'Store (ms)':<12} {'Search (ms)':<12} "
            f"{'Found':<10}"
        )
        if self.config.measure_memory:
            header += f" {'Memory (MB)':<12}"
        print(header)
        print("-" * len(header))

        for result in self.results.values():
            found = f"{result.num_found}/{result.num_searched}"
            row = (
                f"{result.method_name:<32} {result.store_time_ms:<12.6f} "
                f"{result.search_time_ms:<12.6f} {found:<10}"
            )
            if self.config.measure_memory and result.memory_usage is not None:
                row += f" {result.memory_usage:<12.2f}"
            elif self.config.measure_memory:
                row += f" {'N/A':<12}"
            print(row)

    def generate_plot(
        self,
        show_plots: bool = False,
        save_plot: bool = True,
        output_dir: Optional[Union[str, Path]] = None,
    ) -> Optional[Path]:
        """Draw store and search times of every method as grouped bars"""
        if not self.results:
            return None

        phases = ["Store", "Search"]
        methods = list(self.results.values())
        width = 0.8 / len(methods)
        colors = ["blue", "green", "red", "orange"]

        plt.figure(figsize=(10, 6))
        for i, result in enumerate(methods):
            positions = [p + i * width for p in range(len(phases))]
            plt.bar(
                positions,
                [result.store_time_ms, result.search_time_ms],
                width=width,
                color=colors[i % len(colors)],
                label=result.method_name,
            )

        plt.xticks([p + width * (len(methods) - 1) / 2 for p in range(len(phases))], phases)
        plt.yscale("log")
        plt.ylabel("Average time per operation (ms)")
        plt.title(f"{self.config.plot_name} - Store vs Search")
        plt.legend()
        plt.grid(True, axis="y", alpha=0.3)
        plt.tight_layout()

        filename = None
        if save_plot:
            filename = Path(output_dir or ".") / f"{self.config.plot_name}.png"
            plt.savefig(filename, dpi=300, bbox_inches="tight")

        if show_plots:
            plt.show()
        else:
            plt.close()

        return filename
