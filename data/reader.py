import re
from pathlib import Path
from typing import Iterator, List, Optional, Union

from src.errors import InputUnavailableError

MAX_INPUT_SIZE = 1000  # maximum number of values stored per run
MAX_SEARCH_SIZE = 1000  # maximum number of values searched per run

_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


class IntegerReader:
    """Reads a bounded sequence of whitespace separated integers from a text file."""

    def __init__(self, filepath: Union[str, Path], limit: Optional[int] = MAX_INPUT_SIZE):
        self.filepath = Path(filepath)

        if limit is not None and limit < 0:
            raise ValueError("Limit must be non-negative or None")
        self._limit = limit

        if not self.filepath.is_file():
            raise InputUnavailableError(f"cannot open file {self.filepath}!")

        self._values = self._load()

    def _load(self) -> List[int]:
        """Read integers until end of file, the limit, or the first non-integer text."""
        values: List[int] = []
        if self._limit == 0:
            return values

        try:
            with open(self.filepath, "r", encoding="utf-8") as f:
                for line in f:
                    for token in line.split():
                        match = _INTEGER_TOKEN.match(token)
                        if match is None:
                            return values
                        values.append(int(match.group()))
                        if self._limit is not None and len(values) >= self._limit:
                            return values
                        # "12abc" yields 12, then reading stops at "abc"
                        if match.end() != len(token):
                            return values
        except (OSError, UnicodeDecodeError) as e:
            raise InputUnavailableError(f"cannot open file {self.filepath}!") from e

        return values

    @property
    def limit(self) -> Optional[int]:
        return self._limit

    @property
    def values(self) -> List[int]:
        """A copy of the values read."""
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> int:
        return self._values[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def get_stats(self) -> dict:
        """Get statistics about the loaded dataset."""
        count = len(self._values)
        return {
            "count": count,
            "limit": self._limit,
            "truncated": self._limit is not None and count == self._limit,
            "distinct": len(set(self._values)),
            "min": min(self._values) if count else None,
            "max": max(self._values) if count else None,
            "file_size": self.filepath.stat().st_size,
        }

    def close(self) -> None:
        """Nothing is held open after loading; kept for context manager use."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
