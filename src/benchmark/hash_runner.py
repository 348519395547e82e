"""
Hashing benchmark runner.

Usage examples:
    python -m src.benchmark.hash_runner data/input.txt data/search.txt 1499
    hash-benchmark data/input.txt data/search.txt 1499 --repetitions 100
"""

import sys

from ..data_structures.entries import make_input_entries, make_search_entries
from ..errors import BenchmarkError, InvalidConfigurationError
from .benchmark import DEFAULT_HASH_REPETITIONS, BenchmarkRunner
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
        prog="hash-benchmark",
        description="Store integers in a quadratic probing hash table and look them up",
    )
    parser.add_argument("input_file", help="File with the integers to store")
    parser.add_argument("search_file", help="File with the integers to search for")
    parser.add_argument("size", type=int, help="Hash table size (positive integer)")
    add_repetition_arguments(parser, DEFAULT_HASH_REPETITIONS)

    args = parser.parse_args(argv)

    try:
        if args.size <= 0:
            raise InvalidConfigurationError("hash table size must be greater than 0!")

        keys, search_keys = load_datasets(args.input_file, args.search_file)

        runner = BenchmarkRunner(config_from_args(args))
        result = runner.run_hashing(
            make_input_entries(keys), make_search_entries(search_keys), args.size
        )
    except BenchmarkError as e:
        print(f"Error: {e}")
        return EXIT_FAILURE

    print(ReportFormatter().format_hashing(args.input_file, args.search_file, result))
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
