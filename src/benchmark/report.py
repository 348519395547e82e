"""
Plain text reports for a finished benchmark run.

The layout follows the classic storage and retrieval assignment output:
a banner, the data sources, counts, storage details (collisions or sort
counters), one line per search key, and the average timings.
"""

from typing import List

from .benchmark import HashingResult, SortedResult

TITLE = "Data storage and retrieval:"
SUBTITLE = "a comparison of hashing and directed search of sorted data"
RULE = "================================"


class ReportFormatter:
    """Formats HashingResult and SortedResult objects as text."""

    def _header(self, input_file: str, search_file: str, result) -> List[str]:
        return [
            TITLE,
            SUBTITLE,
            RULE,
            "",
            f"Input data loaded from file {input_file}",
            f"Retrieval data loaded from file {search_file}",
            f"Storage Method: {result.method_name}",
        ]

    def _timings(self, result) -> List[str]:
        return [
            "Execution times:",
            "",
            f"  Time to store data: {result.store_time_ms:f} ms",
            f"  Time to retrieve data: {result.search_time_ms:f} ms",
            "",
        ]

    def format_hashing(
        self, input_file: str, search_file: str, result: HashingResult
    ) -> str:
        lines = self._header(input_file, search_file, result)
        lines += [
            f"Number of items stored in the hash table: {result.num_stored}",
            f"Number of items searched: {result.num_searched}",
            f"Number of items found: {result.num_found}",
            "",
            "Storage details:",
            "",
            f"  Hash table size: {result.structure_size}",
        ]
        for entry in result.entries:
            for index in entry.collisions:
                lines.append(
                    f"  Collision occurred saving item with value {entry.key} "
                    f"at hash table location {index}"
                )

        lines += ["", "Retrieval details:", ""]
        for search in result.searches:
            if search.found:
                lines.append(
                    f"  Value {search.key} found in the hash table at position {search.index}"
                )
            else:
                lines.append(f"  Value {search.key} not found in the hash table")

        lines.append("")
        lines += self._timings(result)
        lines += [
            f"Hash table is {result.table.fill_percentage:3.0f}% full.",
            "",
            RULE,
            "",
        ]
        return "\n".join(lines)

    def format_sorted(
        self, input_file: str, search_file: str, result: SortedResult
    ) -> str:
        lines = self._header(input_file, search_file, result)
        lines += [
            f"Number of items stored in the array: {result.num_stored}",
            f"Number of items searched: {result.num_searched}",
            f"Number of items found: {result.num_found}",
            "",
            "Storage details:",
            "",
            f"  <{result.sort_stats.comparisons}> comparisons performed",
            f"  <{result.sort_stats.swaps}> swaps performed",
            "",
            "Retrieval details:",
            "",
        ]
        for search in result.searches:
            if search.found:
                lines.append(
                    f"  Value {search.key} found in the sorted array at position {search.index}"
                )
            else:
                lines.append(f"  Value {search.key} not found in the sorted array")

        lines.append("")
        lines += self._timings(result)
        lines += [RULE, ""]
        return "\n".join(lines)
