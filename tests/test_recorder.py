import logging
from pathlib import Path

import pytest

from dupflag import matcher
from dupflag.encoder import EncodedImage
from dupflag.errors import StoreWriteError
from dupflag.recorder import flag_images
from dupflag.store import FlatFileStore

LOGGER = logging.getLogger("dupflag.tests")


def _image(b64: str, name: str) -> EncodedImage:
    return EncodedImage(file_path=Path(name), base64=b64, chunk_length=4)


@pytest.fixture()
def store(tmp_path: Path) -> FlatFileStore:
    return FlatFileStore(tmp_path / "store.db")


def test_flag_new_image_then_again(store: FlatFileStore, caplog):
    caplog.set_level(logging.INFO)
    img = _image("ABCD1234", "imgA.png")

    stats = flag_images([img], store, store.load(), LOGGER)
    assert (stats.tally, stats.total) == (1, 1)
    assert store.load() == "ABCD1234\n"
    assert matcher.exists_exact(img, store.load())

    stats = flag_images([img], store, store.load(), LOGGER)
    assert (stats.tally, stats.total) == (0, 1)
    assert store.load().splitlines() == ["ABCD1234"]
    assert "File already exists in data store: imgA.png" in caplog.text
    assert "Flag complete. Added 0/1 file(s)." in caplog.text


def test_batch_uses_snapshot_by_default(store: FlatFileStore):
    images = [_image("SAME0000", "a.png"), _image("SAME0000", "b.png")]
    stats = flag_images(images, store, store.load(), LOGGER)
    assert stats.tally == 2
    assert store.load().splitlines() == ["SAME0000", "SAME0000"]


def test_dedupe_batch_catches_identical_images(store: FlatFileStore, caplog):
    caplog.set_level(logging.INFO)
    images = [_image("SAME0000", "a.png"), _image("SAME0000", "b.png"), _image("OTHER111", "c.png")]
    stats = flag_images(images, store, store.load(), LOGGER, dedupe_batch=True)
    assert (stats.tally, stats.total) == (2, 3)
    assert store.load().splitlines() == ["SAME0000", "OTHER111"]
    assert "File already exists in data store: b.png" in caplog.text


class _FailingStore(FlatFileStore):
    def __init__(self, path, fail_on):
        super().__init__(path)
        self.fail_on = fail_on

    def append(self, entry):
        if entry == self.fail_on:
            raise StoreWriteError("disk full")
        super().append(entry)


def test_write_failure_aborts_batch_and_keeps_earlier_appends(tmp_path: Path, caplog):
    caplog.set_level(logging.INFO)
    store = _FailingStore(tmp_path / "store.db", fail_on="BBBB")
    images = [_image("AAAA", "a.png"), _image("BBBB", "b.png"), _image("CCCC", "c.png")]
    with pytest.raises(StoreWriteError):
        flag_images(images, store, store.load(), LOGGER)
    assert store.load().splitlines() == ["AAAA"]
    assert "Error storing file: b.png\ndisk full" in caplog.text
    assert any(r.levelname == "CRITICAL" for r in caplog.records)
