import logging
from pathlib import Path

from dupflag.encoder import EncodedImage
from dupflag.scanner import check_images

LOGGER = logging.getLogger("dupflag.tests")


def _image(b64: str, name: str) -> EncodedImage:
    return EncodedImage(file_path=Path(name), base64=b64, chunk_length=4)


def test_partial_scenario_from_shared_chunk(caplog):
    caplog.set_level(logging.INFO)
    img = _image("XYZABCD1234QQQ", "imgB.png")

    stats, results = check_images([img], "ABCD1234\n", LOGGER, partial=True)
    assert (stats.tally, stats.total) == (1, 1)
    assert results[0].exact is False and results[0].partial is True
    assert "File found in data store: imgB.png" in caplog.text


def test_middle_chunk_needs_partial_flag(caplog):
    caplog.set_level(logging.INFO)
    img = _image("QQQQ5678RRRR", "mid.png")
    store_text = "ABCD5678EFGH\n"

    stats, _ = check_images([img], store_text, LOGGER)
    assert stats.tally == 0
    assert "Did not find file in data store: mid.png" in caplog.text

    stats, _ = check_images([img], store_text, LOGGER, partial=True)
    assert stats.tally == 1


def test_tally_over_mixed_batch(caplog):
    caplog.set_level(logging.INFO)
    images = [_image("ABCD1234", "same.png"), _image("ZZZZ", "other.png")]
    stats, results = check_images(images, "ABCD1234\n", LOGGER, partial=True)
    assert stats.ratio() == "1/2"
    assert [r.found for r in results] == [True, False]
    assert "Check complete. Found 1/2 file(s) matching in data store." in caplog.text


def test_partial_only_match_logs_chunk_index(caplog):
    caplog.set_level(logging.DEBUG, logger="dupflag.tests")
    img = _image("XYZABCD1234QQQ", "imgB.png")
    check_images([img], "ABCD1234\n", LOGGER, partial=True)
    assert "Partial match only: imgB.png (chunk 1 of 4)" in caplog.text
