"""Custom exception hierarchy for dvcheck.

Exception tree:
    DVCheckError
    +-- InvalidArgument      (bad configuration or malformed play log input)
    |   +-- MissingColumns   (required play-log columns absent)
    +-- MatchFileError       (match document unreadable or malformed)

Data-quality findings are never raised; they are returned as diagnostics.
"""

from typing import Optional


class DVCheckError(Exception):
    """Base exception for all dvcheck errors."""


class InvalidArgument(DVCheckError, ValueError):
    """A caller-supplied argument is invalid.

    Raised before any rule runs, so no partial results are produced.
    """

    def __init__(self, message: str, *, argument: Optional[str] = None):
        self.argument = argument
        super().__init__(message)


class MissingColumns(InvalidArgument):
    """Play-log rows lack one or more required columns."""

    def __init__(self, columns: list[str]):
        self.columns = sorted(columns)
        super().__init__(
            f"Play log is missing required columns: {', '.join(self.columns)}",
            argument="play_log",
        )


class MatchFileError(DVCheckError):
    """A match document could not be read or does not match the schema."""

    def __init__(self, message: str, *, path: Optional[str] = None):
        self.path = path
        super().__init__(message)
