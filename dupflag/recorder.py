"""Flag: record the encodings of new images in the store."""
import logging
from dataclasses import dataclass
from typing import Iterable

from dupflag.encoder import EncodedImage
from dupflag.errors import StoreWriteError
from dupflag.logs import log_error
from dupflag.matcher import exists_exact
from dupflag.store import FlatFileStore


@dataclass
class OperationStats:
    total: int = 0
    tally: int = 0

    def ratio(self) -> str:
        return f"{self.tally}/{self.total}"


def flag_images(
    images: Iterable[EncodedImage],
    store: FlatFileStore,
    store_text: str,
    logger: logging.Logger,
    dedupe_batch: bool = False,
) -> OperationStats:
    """Append every image not already present in ``store_text``.

    ``store_text`` is the snapshot loaded before the batch. Unless
    ``dedupe_batch`` is set it is not extended after appends, so two identical
    images in one batch are both stored. A failing append aborts the batch;
    appends already made are kept.
    """
    images = list(images)
    stats = OperationStats(total=len(images))
    for image in images:
        if exists_exact(image, store_text):
            logger.info("File already exists in data store: %s", image.file_path)
            continue
        try:
            store.append(image.base64)
        except StoreWriteError as err:
            log_error(logger, f"Error storing file: {image.file_path}", err)
            raise
        if dedupe_batch:
            store_text = store_text + image.base64 + "\n"
        logger.info("File flagged: %s", image.file_path)
        stats.tally += 1

    logger.info("Flag complete. Added %s file(s).", stats.ratio())
    return stats
