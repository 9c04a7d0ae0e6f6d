"""
Everything the cli can fail with.

Each class carries the exit status the process ends with, so __main__
only has to do:

    >>> try:
            run(args)
        except PcsDumpError as e:
            LOG.error(e)
            return e.exit_code

Anything that isn't one of these is an unexpected fault and exits 1.
"""


class PcsDumpError(Exception):
    exit_code = 1


class UsageError(PcsDumpError):
    exit_code = 2


class InvalidYearError(UsageError):
    exit_code = 3


class UnknownRaceError(UsageError):
    exit_code = 4


class MissingCapabilityError(PcsDumpError):
    exit_code = 5


class DownloadError(PcsDumpError):
    exit_code = 6

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ExtractionError(PcsDumpError):
    """
    A lookup that has no fallback failed, eg a row without its flag span.
    Only raised when extracting in strict mode.
    """
    exit_code = 1
