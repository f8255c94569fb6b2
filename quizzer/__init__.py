"""
Quizzer - interactive command-line quiz trainer.

Keeps question/answer pairs in memory, lets the user manage and try them one
by one, and plays them all in random order with a sudden-death score.
"""

from quizzer.errors import ErrorKind, InvalidIndexError, MissingArgumentError, QuizzerError
from quizzer.store import Quiz, QuizStore

__version__ = "1.0.0"

__all__ = [
    "ErrorKind",
    "InvalidIndexError",
    "MissingArgumentError",
    "Quiz",
    "QuizStore",
    "QuizzerError",
]
