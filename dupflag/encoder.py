"""Encoding of image files into base64 strings and their chunks."""
import base64
from dataclasses import dataclass, field
from pathlib import Path

from dupflag.chunker import DEFAULT_CHUNK_LENGTH, Chunks
from dupflag.errors import ImageReadError


@dataclass(frozen=True)
class EncodedImage:
    file_path: Path
    base64: str
    chunk_length: int = DEFAULT_CHUNK_LENGTH
    chunks: Chunks = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "chunks", Chunks(self.base64, self.chunk_length))


def encode_bytes(data: bytes) -> str:
    """Standard base64 of ``data`` as a single unwrapped line."""
    return base64.b64encode(data).decode("ascii")


def read_image_bytes(image_path: Path) -> bytes:
    try:
        with open(str(image_path), "rb") as f:
            return f.read()
    except OSError as err:
        raise ImageReadError(f"Unable to read image: {image_path} ({err})") from err


def encode_image(image_path: Path, chunk_length: int = DEFAULT_CHUNK_LENGTH) -> EncodedImage:
    data = read_image_bytes(image_path)
    return EncodedImage(file_path=Path(image_path), base64=encode_bytes(data), chunk_length=chunk_length)
