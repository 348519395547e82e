"""Pieces shared by the hash-benchmark, sorted-benchmark and compare-benchmark commands."""

import argparse
import sys
from typing import List, Tuple

from data.reader import MAX_INPUT_SIZE, MAX_SEARCH_SIZE, IntegerReader

from ..errors import EmptyDatasetError
from .benchmark import BenchmarkConfig

EXIT_SUCCESS = 0
EXIT_FAILURE = -1


class BenchmarkArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad arguments with the benchmark's exit status."""

    def error(self, message):
        self.print_usage(sys.stderr)
        print(f"Error: {message}")
        self.exit(EXIT_FAILURE)


def load_datasets(
    input_file: str,
    search_file: str,
    input_limit: int = MAX_INPUT_SIZE,
    search_limit: int = MAX_SEARCH_SIZE,
) -> Tuple[List[int], List[int]]:
    """
    Read the keys to store and the keys to search for.

    Raises InputUnavailableError when a file cannot be opened and
    EmptyDatasetError when a file yields no integers.
    """
    with IntegerReader(input_file, limit=input_limit) as reader:
        keys = reader.values
    if not keys:
        raise EmptyDatasetError(f"No input data loaded from file {input_file}!")

    with IntegerReader(search_file, limit=search_limit) as reader:
        search_keys = reader.values
    if not search_keys:
        raise EmptyDatasetError(f"No retrieval data loaded from file {search_file}!")

    return keys, search_keys


def add_repetition_arguments(parser: argparse.ArgumentParser, default: int) -> None:
    parser.add_argument(
        "--repetitions",
        type=int,
        default=default,
        help=f"Store phase repetitions (default: {default})",
    )
    parser.add_argument(
        "--search-repetitions",
        type=int,
        default=None,
        help="Search phase repetitions (default: same as --repetitions)",
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only print the final report"
    )


def config_from_args(args, **kwargs) -> BenchmarkConfig:
    """Build a BenchmarkConfig from the options added by add_repetition_arguments."""
    search_repetitions = args.search_repetitions
    if search_repetitions is None:
        search_repetitions = args.repetitions
    return BenchmarkConfig(
        store_repetitions=args.repetitions,
        search_repetitions=search_repetitions,
        verbose=not args.quiet,
        **kwargs,
    )
