"""Check: look up images in the store without modifying it."""
import logging
from typing import Iterable, List, Tuple

from dupflag.encoder import EncodedImage
from dupflag.matcher import MatchResult, first_matching_chunk, match
from dupflag.recorder import OperationStats


def check_images(
    images: Iterable[EncodedImage],
    store_text: str,
    logger: logging.Logger,
    partial: bool = False,
) -> Tuple[OperationStats, List[MatchResult]]:
    images = list(images)
    stats = OperationStats(total=len(images))
    results: List[MatchResult] = []
    for image in images:
        res = match(image, store_text, partial=partial)
        results.append(res)
        if res.found:
            logger.info("File found in data store: %s", image.file_path)
            if not res.exact:
                logger.debug(
                    "Partial match only: %s (chunk %s of %s)",
                    image.file_path,
                    first_matching_chunk(image, store_text),
                    len(image.chunks),
                )
            stats.tally += 1
        else:
            logger.info("Did not find file in data store: %s", image.file_path)

    logger.info("Check complete. Found %s file(s) matching in data store.", stats.ratio())
    return stats, results
