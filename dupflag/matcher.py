"""Matcher: exact and chunked partial containment against the store text.

The store text is searched as one opaque string, so a needle may also match
across the boundary between two stored lines. All tests are literal substring
searches; base64 characters such as ``+`` and ``/`` carry no special meaning.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dupflag.encoder import EncodedImage


@dataclass
class MatchResult:
    file_path: Path
    exact: bool
    partial: Optional[bool] = None

    @property
    def found(self) -> bool:
        return self.exact or bool(self.partial)


def exists_exact(image: EncodedImage, store_text: str) -> bool:
    return image.base64 in store_text


def first_matching_chunk(image: EncodedImage, store_text: str) -> Optional[int]:
    """Index of the leftmost chunk contained in ``store_text``, else None."""
    for i, chunk in enumerate(image.chunks):
        if chunk in store_text:
            return i
    return None


def exists_partial(image: EncodedImage, store_text: str) -> bool:
    return first_matching_chunk(image, store_text) is not None


def match(image: EncodedImage, store_text: str, partial: bool = False) -> MatchResult:
    exact = exists_exact(image, store_text)
    part = exists_partial(image, store_text) if partial else None
    return MatchResult(file_path=image.file_path, exact=exact, partial=part)
