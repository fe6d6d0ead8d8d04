from pathlib import Path

import pytest

from dupflag.config import Config
from dupflag.errors import ImageReadError, ValidationError
from dupflag.inputs import collect_images


@pytest.fixture()
def image_dir(tmp_path: Path) -> Path:
    for name in ["b.png", "a.JPG", "c.jpeg", "notes.txt", "photo.png.bak"]:
        (tmp_path / name).write_bytes(b"x")
    (tmp_path / "sub.png").mkdir()
    (tmp_path / "sub.png" / "inner.png").write_bytes(b"x")
    return tmp_path


def test_directory_yields_sorted_accepted_files(image_dir: Path):
    files = collect_images(image_dir, Config())
    assert [p.name for p in files] == ["a.JPG", "b.png", "c.jpeg"]


def test_single_file(image_dir: Path):
    assert collect_images(image_dir / "b.png", Config()) == [image_dir / "b.png"]


def test_custom_extensions(image_dir: Path):
    files = collect_images(image_dir, Config(image_extensions="txt"))
    assert [p.name for p in files] == ["notes.txt"]


def test_rejected_file_is_validation_error(image_dir: Path):
    with pytest.raises(ValidationError):
        collect_images(image_dir / "notes.txt", Config())


def test_empty_directory_is_validation_error(tmp_path: Path):
    with pytest.raises(ValidationError):
        collect_images(tmp_path, Config())


def test_missing_target_is_read_error(tmp_path: Path):
    with pytest.raises(ImageReadError):
        collect_images(tmp_path / "missing", Config())
