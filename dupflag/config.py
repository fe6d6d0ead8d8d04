"""Runtime configuration for the flag/check commands.

Defaults may be overridden through ``DUPFLAG_*`` environment variables and
then through the global CLI options.
"""
import os
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Pattern

DEFAULT_STORE_PATH = os.environ.get("DUPFLAG_STORE", "store.db")
DEFAULT_LOG_PATH = os.environ.get("DUPFLAG_LOG", "logs.log")
DEFAULT_IMAGE_EXTENSIONS = os.environ.get("DUPFLAG_EXTENSIONS", "jpg|jpeg|png")
DEFAULT_CHUNK_LENGTH = 120


def env_chunk_length() -> int:
    """Chunk length from DUPFLAG_CHUNK_LENGTH, read when a Config is built."""
    raw = os.environ.get("DUPFLAG_CHUNK_LENGTH")
    if raw is None or not raw.strip():
        return DEFAULT_CHUNK_LENGTH
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"DUPFLAG_CHUNK_LENGTH must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Config:
    store_path: Path = Path(DEFAULT_STORE_PATH)
    log_path: Path = Path(DEFAULT_LOG_PATH)
    image_extensions: str = DEFAULT_IMAGE_EXTENSIONS
    chunk_length: int = field(default_factory=env_chunk_length)

    def __post_init__(self):
        if self.chunk_length <= 0:
            raise ValueError(f"chunk_length must be positive, got {self.chunk_length}")
        if not self.extensions():
            raise ValueError("image_extensions must name at least one suffix")

    def extensions(self):
        """Accepted suffixes, lower-cased and without the leading dot."""
        parts = (p.strip().lstrip(".").lower() for p in self.image_extensions.split("|"))
        return tuple(p for p in parts if p)

    def extension_pattern(self) -> Pattern:
        alternatives = "|".join(re.escape(ext) for ext in self.extensions())
        return re.compile(rf"\.(?:{alternatives})$", re.IGNORECASE)

    def accepts(self, path: Path) -> bool:
        return self.extension_pattern().search(Path(path).name) is not None

    def with_overrides(
        self,
        store_path: Optional[str] = None,
        log_path: Optional[str] = None,
        image_extensions: Optional[str] = None,
        chunk_length: Optional[int] = None,
    ) -> "Config":
        changes = {}
        if store_path is not None:
            changes["store_path"] = Path(store_path)
        if log_path is not None:
            changes["log_path"] = Path(log_path)
        if image_extensions is not None:
            changes["image_extensions"] = image_extensions
        if chunk_length is not None:
            changes["chunk_length"] = chunk_length
        return replace(self, **changes) if changes else self
