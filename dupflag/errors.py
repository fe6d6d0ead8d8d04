"""Error kinds raised by the flag/check pipeline, each mapped to an exit code."""

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_IO = 2


class DupFlagError(Exception):
    exit_code = EXIT_USAGE


class UsageError(DupFlagError):
    """No command, an unknown command or invalid options."""

    exit_code = EXIT_USAGE


class ValidationError(DupFlagError):
    """The target holds no file with an accepted extension."""

    exit_code = EXIT_USAGE


class ImageReadError(DupFlagError, OSError):
    """An input file or directory could not be read."""

    exit_code = EXIT_IO


class StoreWriteError(DupFlagError, OSError):
    """Appending to the store file failed."""

    exit_code = EXIT_IO


class StoreReadError(DupFlagError, OSError):
    """The store file exists but is not a readable text store."""

    exit_code = EXIT_IO
