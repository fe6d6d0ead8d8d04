"""Append-only flat-file store of base64 encodings, one per line."""
from pathlib import Path

from dupflag.errors import StoreReadError, StoreWriteError


class FlatFileStore:
    """Newline-delimited text file holding every flagged encoding.

    The store never deduplicates on its own: callers test for existence with
    the matcher before calling :meth:`append`.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def ensure_exists(self) -> None:
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch()

    def load(self) -> str:
        """Return the raw text of the store, creating an empty one if needed."""
        self.ensure_exists()
        try:
            with self.path.open("r", encoding="utf-8") as f:
                return f.read()
        except UnicodeDecodeError as err:
            raise StoreReadError(f"Store is not a text file: {self.path}") from err

    def append(self, entry: str) -> None:
        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(entry + "\n")
        except OSError as err:
            raise StoreWriteError(f"Unable to write store {self.path}: {err}") from err

    def count(self) -> int:
        return sum(1 for line in self.load().splitlines() if line)

    def __repr__(self) -> str:
        return f"FlatFileStore({str(self.path)!r})"
