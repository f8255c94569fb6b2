"""
Error taxonomy for the quiz shell.

Store operations raise these; the command dispatcher catches them and turns
them into an ErrorKind on the command outcome.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Kind of recoverable failure reported back to the shell."""

    INVALID_INDEX = "invalid_index"
    MISSING_ARGUMENT = "missing_argument"
    UNKNOWN_COMMAND = "unknown_command"


class QuizzerError(Exception):
    """Base class for errors the shell recovers from."""

    kind: ErrorKind


class InvalidIndexError(QuizzerError):
    """Raised when a quiz id is not a number or is out of range."""

    kind = ErrorKind.INVALID_INDEX

    def __init__(self, raw_id: Any):
        self.raw_id = raw_id
        super().__init__(f"Invalid value for parameter id: '{raw_id}'")


class MissingArgumentError(QuizzerError):
    """Raised when a command that needs an id was given none."""

    kind = ErrorKind.MISSING_ARGUMENT

    def __init__(self, command: str):
        self.command = command
        super().__init__("Missing parameter id.")


class UnknownCommandError(QuizzerError):
    """Raised for a command word the shell does not know."""

    kind = ErrorKind.UNKNOWN_COMMAND

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"Unknown command: '{word}'. Type 'help' to list commands.")
