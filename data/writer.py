import time
from pathlib import Path
from typing import Iterable


class IntegerWriter:
    """Writes integers as text, one value per line."""

    def __init__(self, filepath: Path):
        self.filepath = Path(filepath)

    def write_integers(self, values: Iterable[int], batch_size: int = 10_000) -> int:
        """Write values to the file and return how many were written."""
        print(f"Writing integers to {self.filepath}...")
        start_time = time.time()

        count = 0
        with open(self.filepath, "w", encoding="utf-8") as data_file:
            batch = []

            for value in values:
                batch.append(value)
                count += 1

                if len(batch) >= batch_size:
                    self._write_batch(batch, data_file)
                    batch.clear()

            # Write remaining batch
            if batch:
                self._write_batch(batch, data_file)

        elapsed = time.time() - start_time
        print(f"Writing complete! {count:,} integers in {elapsed:.1f}s")
        return count

    def _write_batch(self, batch, data_file):
        data_file.write("".join(f"{value}\n" for value in batch))
