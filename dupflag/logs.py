"""Console + file logging.

Every record is written as ``<LEVEL> <message>`` to stdout and appended to the
log file; an error detail, when present, follows on its own line.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "dupflag"
LOG_FORMAT = "%(levelname)s %(message)s"


def configure_logging(log_path: Optional[Path], level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_path is not None:
        try:
            Path(log_path).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(str(log_path), mode="a", encoding="utf-8")
        except OSError as err:
            # fall back to console-only logging
            logger.warning("Could not open log file %s\n%s", log_path, err)
        else:
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
    return logger


def log_error(logger: logging.Logger, message: str, err: Optional[BaseException] = None, level: int = logging.CRITICAL) -> None:
    """Log ``message`` and, when given, the error detail on the next line."""
    if err is not None:
        logger.log(level, "%s\n%s", message, err)
    else:
        logger.log(level, message)
