"""Fixed-length chunking of base64 strings for partial matching."""
from typing import Iterator

DEFAULT_CHUNK_LENGTH = 120


def chunk_count(text_length: int, length: int) -> int:
    """Number of chunks ``length`` wide needed to cover ``text_length`` chars."""
    if length <= 0:
        raise ValueError(f"chunk length must be positive, got {length}")
    return -(-text_length // length)


class Chunks:
    """Lazy, restartable sequence of ``length``-sized slices of ``text``.

    Every slice is ``length`` characters long except possibly the last one,
    which holds the remainder. Iterating twice starts over from the left.
    """

    def __init__(self, text: str, length: int = DEFAULT_CHUNK_LENGTH):
        if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
            raise ValueError(f"chunk length must be a positive integer, got {length!r}")
        self.text = text
        self.length = length

    def __iter__(self) -> Iterator[str]:
        text, n = self.text, self.length
        for start in range(0, len(text), n):
            yield text[start:start + n]

    def __len__(self) -> int:
        return chunk_count(len(self.text), self.length)

    def __repr__(self) -> str:
        return f"Chunks(len={len(self)}, length={self.length})"
