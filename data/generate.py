import argparse
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from mimesis import Numeric

from data.reader import MAX_INPUT_SIZE, MAX_SEARCH_SIZE
from data.writer import IntegerWriter


class IntegerGenerator:
    """Generates reproducible key sets for the storage and retrieval benchmark."""

    def __init__(self, seed: Optional[int] = None, low: int = 0, high: int = 9999):
        if low > high:
            raise ValueError(f"low ({low}) must not exceed high ({high})")
        self.numeric = Numeric(seed=seed)
        self.low = low
        self.high = high

    def generate_key(self) -> int:
        return self.numeric.integer_number(start=self.low, end=self.high)

    def generate_batch(self, count: int) -> Iterator[int]:
        """Generate count keys; duplicates are possible."""
        for _ in range(count):
            yield self.generate_key()

    def generate_input(self, count: int, distinct: bool = True) -> List[int]:
        """Generate the keys to store, distinct by default."""
        if not distinct:
            return list(self.generate_batch(count))

        span = self.high - self.low + 1
        if count > span:
            raise ValueError(
                f"cannot draw {count:,} distinct keys from a range of {span:,}"
            )
        return self.numeric.random.sample(range(self.low, self.high + 1), count)

    def generate_search(
        self, stored: Sequence[int], count: int, hit_ratio: float = 0.5
    ) -> List[int]:
        """
        Generate search keys, roughly hit_ratio of them taken from stored.

        The remaining keys are drawn from just above the key range so they
        are guaranteed to be absent.
        """
        if not 0.0 <= hit_ratio <= 1.0:
            raise ValueError("hit_ratio must be between 0 and 1")

        rng = self.numeric.random
        keys: List[int] = []
        for _ in range(count):
            if stored and rng.random() < hit_ratio:
                keys.append(rng.choice(stored))
            else:
                keys.append(self.high + 1 + rng.randint(0, self.high - self.low))
        return keys


def write_dataset(
    output_dir: Path,
    input_count: int = MAX_INPUT_SIZE,
    search_count: int = MAX_SEARCH_SIZE,
    seed: Optional[int] = 42,
    high: int = 9999,
    hit_ratio: float = 0.5,
) -> Tuple[Path, Path]:
    """Write input.txt and search.txt under output_dir and return their paths."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    generator = IntegerGenerator(seed=seed, high=high)
    stored = generator.generate_input(input_count)
    searched = generator.generate_search(stored, search_count, hit_ratio=hit_ratio)

    input_path = output_dir / "input.txt"
    search_path = output_dir / "search.txt"
    IntegerWriter(input_path).write_integers(stored)
    IntegerWriter(search_path).write_integers(searched)
    return input_path, search_path


def main(argv=None):
    """Generate an input file and a search file for the benchmark runners."""
    parser = argparse.ArgumentParser(description="Generate benchmark datasets")
    parser.add_argument("--output-dir", default="data", help="Directory for the files")
    parser.add_argument("--input-count", type=int, default=MAX_INPUT_SIZE)
    parser.add_argument("--search-count", type=int, default=MAX_SEARCH_SIZE)
    parser.add_argument("--max-value", type=int, default=9999)
    parser.add_argument("--hit-ratio", type=float, default=0.5)
    parser.add_argument("--seed", type=int, default=42, help="For reproducible results")
    args = parser.parse_args(argv)

    try:
        input_path, search_path = write_dataset(
            Path(args.output_dir),
            input_count=args.input_count,
            search_count=args.search_count,
            seed=args.seed,
            high=args.max_value,
            hit_ratio=args.hit_ratio,
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"Input data: {input_path}")
    print(f"Retrieval data: {search_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
