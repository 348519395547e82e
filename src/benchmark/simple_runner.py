"""
Side by side benchmark of hashing and sorted search over the same data.

Usage examples:
    python -m src.benchmark.simple_runner data/input.txt data/search.txt
    compare-benchmark data/input.txt data/search.txt --size 2003 --no-plots
"""

import sys

from ..data_structures.entries import make_input_entries, make_search_entries
from ..errors import BenchmarkError, InvalidConfigurationError
from .benchmark import DEFAULT_SORT_REPETITIONS, BenchmarkRunner
from .cli import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    BenchmarkArgumentParser,
    add_repetition_arguments,
    config_from_args,
    load_datasets,
)
from .report import ReportFormatter


def next_prime(n: int) -> int:
    """Smallest prime >= n."""
    candidate = max(n, 2)
    while True:
        if all(candidate % d for d in range(2, int(candidate**0.5) + 1)):
            return candidate
        candidate += 1


def main(argv=None) -> int:
    parser = BenchmarkArgumentParser(
        prog="compare-benchmark",
        description="Benchmark hashing and sorted search on the same data",
    )
    parser.add_argument("input_file", help="File with the integers to store")
    parser.add_argument("search_file", help="File with the integers to search for")
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Hash table size (default: smallest prime >= twice the input count)",
    )
    add_repetition_arguments(parser, DEFAULT_SORT_REPETITIONS)
    parser.add_argument(
        "--plot-name", default="storage-retrieval", help="Name of the output plot file"
    )
    parser.add_argument("--output-dir", default=".", help="Directory for the plot")
    parser.add_argument("--no-plots", action="store_true", help="Skip generating plots")

    args = parser.parse_args(argv)

    try:
        if args.size is not None and args.size <= 0:
            raise InvalidConfigurationError("hash table size must be greater than 0!")

        keys, search_keys = load_datasets(args.input_file, args.search_file)
        size = args.size if args.size is not None else next_prime(2 * len(keys))

        runner = BenchmarkRunner(config_from_args(args, plot_name=args.plot_name))

        print("\nRunning HASHING benchmark...")
        hashing = runner.run_hashing(
            make_input_entries(keys), make_search_entries(search_keys), size
        )
        print("\nRunning SORTED benchmark...")
        sorted_result = runner.run_sorted(keys, make_search_entries(search_keys))
    except BenchmarkError as e:
        print(f"Error: {e}")
        return EXIT_FAILURE

    formatter = ReportFormatter()
    print()
    print(formatter.format_hashing(args.input_file, args.search_file, hashing))
    print(formatter.format_sorted(args.input_file, args.search_file, sorted_result))
    runner.print_data()

    if not args.no_plots:
        filename = runner.generate_plot(show_plots=False, output_dir=args.output_dir)
        print(f"\nBenchmark completed! Plot saved as {filename}")

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
