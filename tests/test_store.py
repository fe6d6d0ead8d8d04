from pathlib import Path

import pytest

from dupflag.errors import StoreReadError, StoreWriteError
from dupflag.store import FlatFileStore


def test_load_creates_empty_store(tmp_path: Path):
    store = FlatFileStore(tmp_path / "nested" / "store.db")
    assert store.load() == ""
    assert store.path.exists()
    assert store.load() == ""


def test_append_adds_newline_terminated_entries(tmp_path: Path):
    store = FlatFileStore(tmp_path / "store.db")
    store.load()
    store.append("ABCD1234")
    store.append("EFGH5678")
    assert store.load() == "ABCD1234\nEFGH5678\n"
    assert store.count() == 2


def test_append_does_not_deduplicate(tmp_path: Path):
    store = FlatFileStore(tmp_path / "store.db")
    store.append("ABCD1234")
    store.append("ABCD1234")
    assert store.load().splitlines() == ["ABCD1234", "ABCD1234"]


def test_append_failure_raises_store_write_error(tmp_path: Path):
    # a directory in place of the store file cannot be opened for appending
    store = FlatFileStore(tmp_path)
    with pytest.raises(StoreWriteError):
        store.append("ABCD1234")


def test_load_rejects_non_text_store(tmp_path: Path):
    path = tmp_path / "store.db"
    path.write_bytes(b"\xff\xfe\x00garbage\n")
    with pytest.raises(StoreReadError):
        FlatFileStore(path).load()
