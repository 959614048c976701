"""Exception hierarchy shared by the parser, the commands and storage."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    MALFORMED_INPUT = "MALFORMED_INPUT"
    UNKNOWN_COMMAND = "UNKNOWN_COMMAND"
    INVALID_ARGUMENTS = "INVALID_ARGUMENTS"
    NO_FIELD_SPECIFIED = "NO_FIELD_SPECIFIED"
    INVALID_DISPLAYED_INDEX = "INVALID_DISPLAYED_INDEX"
    DUPLICATE = "DUPLICATE"
    CARD_NOT_FOUND = "CARD_NOT_FOUND"
    DATA_CONSTRAINT_VIOLATION = "DATA_CONSTRAINT_VIOLATION"
    DATA_LOADING = "DATA_LOADING"
    CONFIG = "CONFIG"
    STORAGE = "STORAGE"


class InvalidFieldError(ValueError):
    """Raised when a card field fails its validity check."""


class FlashdeckError(Exception):
    """Base class for every error reported back to the user."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENTS

    def __init__(self, message: str, *, kind: Optional[ErrorKind] = None) -> None:
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind

    def __str__(self) -> str:
        return self.message


class ParseError(FlashdeckError):
    """Input could not be turned into a command.

    ``usage`` carries the usage string of the verb being parsed, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind = ErrorKind.INVALID_ARGUMENTS,
        usage: Optional[str] = None,
    ) -> None:
        super().__init__(message, kind=kind)
        self.usage = usage


class CommandError(FlashdeckError):
    """A parsed command could not be applied to the current model."""


class IndexOutOfRangeError(CommandError):
    kind = ErrorKind.INVALID_DISPLAYED_INDEX


class DuplicateCardError(CommandError):
    kind = ErrorKind.DUPLICATE


class CardNotFoundError(CommandError):
    kind = ErrorKind.CARD_NOT_FOUND


class DataConstraintError(FlashdeckError):
    kind = ErrorKind.DATA_CONSTRAINT_VIOLATION


class DataLoadingError(FlashdeckError):
    kind = ErrorKind.DATA_LOADING


class ConfigError(FlashdeckError):
    kind = ErrorKind.CONFIG
