"""
Sorted data benchmark runner: selection sort, then binary search.

Usage examples:
    python -m src.benchmark.sorted_runner data/input.txt data/search.txt
    sorted-benchmark data/input.txt data/search.txt --repetitions 10
"""

import sys

from ..data_structures.entries import make_search_entries
from ..errors import BenchmarkError
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


def main(argv=None) -> int:
    parser = BenchmarkArgumentParser(
        prog="sorted-benchmark",
        description="Selection sort integers and look them up with binary search",
    )
    parser.add_argument("input_file", help="File with the integers to store")
    parser.add_argument("search_file", help="File with the integers to search for")
    add_repetition_arguments(parser, DEFAULT_SORT_REPETITIONS)

    args = parser.parse_args(argv)

    try:
        keys, search_keys = load_datasets(args.input_file, args.search_file)

        runner = BenchmarkRunner(config_from_args(args))
        result = runner.run_sorted(keys, make_search_entries(search_keys))
    except BenchmarkError as e:
        print(f"Error: {e}")
        return EXIT_FAILURE

    print(ReportFormatter().format_sorted(args.input_file, args.search_file, result))
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
