"""Resolve a command target (file or directory) into candidate image paths."""
from pathlib import Path
from typing import List

from dupflag.config import Config
from dupflag.errors import ImageReadError, ValidationError


def collect_images(target: Path, config: Config) -> List[Path]:
    """Return the accepted image files named by ``target``.

    A directory contributes its direct entries only, sorted by name.
    """
    target = Path(target)
    if not target.exists():
        raise ImageReadError(f"No such file or directory: {target}")

    files: List[Path] = []
    if target.is_dir():
        try:
            entries = sorted(target.iterdir())
        except OSError as err:
            raise ImageReadError(f"Unable to list directory: {target} ({err})") from err
        for p in entries:
            if p.is_file() and config.accepts(p):
                files.append(p)
    elif target.is_file() and config.accepts(target):
        files.append(target)

    if not files:
        raise ValidationError("No files with accepted extensions found")
    return files
