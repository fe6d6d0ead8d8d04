"""Command-line interface for flagging and checking images.

Usage example:
  python dupflag_cli.py flag images/anvil.png
  python dupflag_cli.py check images/ --partial --report reports/check.csv
"""
import argparse
import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional

from dupflag import report
from dupflag.config import DEFAULT_LOG_PATH, Config
from dupflag.encoder import encode_image
from dupflag.errors import (
    EXIT_IO,
    EXIT_OK,
    EXIT_USAGE,
    DupFlagError,
    StoreWriteError,
    UsageError,
    ValidationError,
)
from dupflag.inputs import collect_images
from dupflag.logs import LOGGER_NAME, configure_logging, log_error
from dupflag.recorder import flag_images
from dupflag.scanner import check_images
from dupflag.store import FlatFileStore

HELP_TEXT = {
    None: (
        "Welcome to the image checker tool. This tool will check the base64 of an image\n"
        "against store of base64 strings. Images can be flagged by directory, and checked\n"
        "by directory.\n\n"
        "Commands:\n"
        "flag image|dir - flags an image or dir and stores it into the store\n"
        "check image|dir [...options] - checks an image or dir against the store\n"
        "help [command] - shows this text or the help of one command\n\n"
        "Options:\n"
        "--partial - chunks image(s) base64 and checks each chunk against the store"
    ),
    "flag": (
        "The flag command will flag either an individual image or directory of images.\n\n"
        "ex: dupflag flag images/anvil-partial.png"
    ),
    "check": (
        "The check command will check an image, or directory of images. It includes the\n"
        "optional parameter --partial, which will break up the base64 into chunks.\n\n"
        "ex: dupflag check images/anvil-partial.png"
    ),
}


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(prog="dupflag", description="Flag images and check for exact or partial duplicates")
    p.add_argument("--store", default=None, help="Path to the store file (default: store.db)")
    p.add_argument("--log-file", default=None, help="Path to the log file (default: logs.log)")
    p.add_argument("--chunk-length", type=_positive_int, default=None,
                   help="Characters per chunk for --partial checks (default: 120)")
    p.add_argument("--extensions", default=None, help="Accepted image extensions, e.g. jpg|jpeg|png")
    sub = p.add_subparsers(dest="command", metavar="{flag,check,help}")

    fp = sub.add_parser("flag", help="Flag an image or directory of images into the store",
                        description=HELP_TEXT["flag"], formatter_class=argparse.RawDescriptionHelpFormatter)
    fp.add_argument("path", help="Image file or directory")
    fp.add_argument("--dedupe-batch", action="store_true",
                    help="Also skip images identical to one flagged earlier in the same run")

    cp = sub.add_parser("check", help="Check an image or directory of images against the store",
                        description=HELP_TEXT["check"], formatter_class=argparse.RawDescriptionHelpFormatter)
    cp.add_argument("path", help="Image file or directory")
    cp.add_argument("--partial", action="store_true", help="Also match fixed-length chunks of the base64")
    cp.add_argument("--report", default=None, help="Write per-file results to this CSV file")

    hp = sub.add_parser("help", help="Show help for the tool or one command")
    hp.add_argument("topic", nargs="?", default=None)
    return p


def resolve_config(args: argparse.Namespace, base: Optional[Config] = None) -> Config:
    try:
        base = base if base is not None else Config()
        return base.with_overrides(
            store_path=args.store,
            log_path=args.log_file,
            image_extensions=args.extensions,
            chunk_length=args.chunk_length,
        )
    except ValueError as err:
        raise UsageError(str(err)) from err


def run_flag(args: argparse.Namespace, config: Config, logger: logging.Logger) -> int:
    paths = collect_images(Path(args.path), config)
    images = [encode_image(p, config.chunk_length) for p in paths]
    store = FlatFileStore(config.store_path)
    store_text = store.load()
    flag_images(images, store, store_text, logger, dedupe_batch=args.dedupe_batch)
    return EXIT_OK


def run_check(args: argparse.Namespace, config: Config, logger: logging.Logger) -> int:
    paths = collect_images(Path(args.path), config)
    images = [encode_image(p, config.chunk_length) for p in paths]
    store_text = FlatFileStore(config.store_path).load()
    _, results = check_images(images, store_text, logger, partial=args.partial)
    if args.report:
        report.write_csv(results, Path(args.report))
        logger.info("Report written: %s", args.report)
    return EXIT_OK


def run_help(args: argparse.Namespace, config: Config, logger: logging.Logger) -> int:
    text = HELP_TEXT.get(args.topic)
    if text is None:
        print(f"Command is not found: {args.topic}")
        return EXIT_USAGE
    print(text)
    return EXIT_OK


COMMANDS: Dict[str, Callable[[argparse.Namespace, Config, logging.Logger], int]] = {
    "flag": run_flag,
    "check": run_check,
    "help": run_help,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = None
    try:
        args = parser.parse_args(argv)
        config = resolve_config(args)
    except SystemExit as exc:
        # raised by argparse after printing --help
        return exc.code if isinstance(exc.code, int) else EXIT_OK
    except UsageError as err:
        log_path = args.log_file if args is not None and args.log_file else DEFAULT_LOG_PATH
        logger = configure_logging(Path(log_path))
        log_error(logger, f"{err}. Use --help to view current commands.")
        logger.info("Exiting...")
        return err.exit_code

    if args.command == "help":
        return run_help(args, config, logging.getLogger(LOGGER_NAME))

    logger = configure_logging(config.log_path)
    command = COMMANDS.get(args.command)
    if command is None:
        log_error(logger, "Command missing. Use --help to view current commands.")
        logger.info("Exiting...")
        return EXIT_USAGE

    try:
        code = command(args, config, logger)
    except StoreWriteError as err:
        # already logged by the recorder
        code = err.exit_code
    except ValidationError as err:
        log_error(logger, str(err), level=logging.WARNING)
        code = err.exit_code
    except DupFlagError as err:
        log_error(logger, str(err), err.__cause__)
        code = err.exit_code
    except OSError as err:
        log_error(logger, "I/O error", err)
        code = EXIT_IO
    logger.info("Exiting...")
    return code
