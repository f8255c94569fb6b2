"""
In-memory quiz store.

Quizzes are identified by their position. Deleting a quiz shifts every later
quiz down by one, so an id is only meaningful against the current contents.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from loguru import logger

from quizzer.errors import InvalidIndexError

_DIGITS = re.compile(r"[0-9]+")

DEFAULT_QUIZZES = [
    ("Capital of Italy", "Rome"),
    ("Capital of France", "Paris"),
    ("Capital of Spain", "Madrid"),
    ("Capital of Portugal", "Lisbon"),
]


@dataclass(frozen=True)
class Quiz:
    """A question and its expected answer, stored verbatim."""
    question: str
    answer: str


class _QuizView:
    """Restartable (index, quiz) iterable over a store."""

    def __init__(self, quizzes: list[Quiz]):
        self._quizzes = quizzes

    def __iter__(self) -> Iterator[tuple[int, Quiz]]:
        return enumerate(self._quizzes)


class QuizStore:
    """Ordered collection of quizzes with index-validated access."""

    def __init__(self, quizzes: Iterable[tuple[str, str]] | None = None):
        self._quizzes: list[Quiz] = []
        for question, answer in quizzes or ():
            self.add(question, answer)

    @classmethod
    def with_defaults(cls) -> "QuizStore":
        """Store seeded with the built-in capital-city quizzes."""
        return cls(DEFAULT_QUIZZES)

    def __len__(self) -> int:
        return len(self._quizzes)

    @property
    def size(self) -> int:
        return len(self._quizzes)

    def indices(self) -> list[int]:
        """Snapshot of the ids that are currently valid."""
        return list(range(len(self._quizzes)))

    def get_all(self) -> Iterable[tuple[int, Quiz]]:
        """Lazily yield (index, quiz) pairs in storage order."""
        return _QuizView(self._quizzes)

    def get_by_index(self, id: Any) -> Quiz:
        return self._quizzes[self._validate(id)]

    def add(self, question: str, answer: str) -> None:
        self._quizzes.append(Quiz(question, answer))
        logger.debug(f"Added quiz {len(self._quizzes) - 1}: {question!r}")

    def update(self, id: Any, question: str, answer: str) -> None:
        index = self._validate(id)
        self._quizzes[index] = Quiz(question, answer)
        logger.debug(f"Updated quiz {index}: {question!r}")

    def delete_by_index(self, id: Any) -> None:
        index = self._validate(id)
        del self._quizzes[index]
        logger.debug(f"Deleted quiz {index}, {len(self._quizzes)} left")

    def _validate(self, id: Any) -> int:
        """
        Turn a raw id into a list position.

        Accepts ints and strings of ASCII digits (surrounding whitespace is
        ignored). Raises InvalidIndexError for anything else, for negative
        values and for values past the end.
        """
        if isinstance(id, bool):
            raise InvalidIndexError(id)
        if isinstance(id, int):
            index = id
        elif isinstance(id, str) and _DIGITS.fullmatch(id.strip()):
            index = int(id.strip())
        else:
            raise InvalidIndexError(id)

        if index < 0 or index >= len(self._quizzes):
            raise InvalidIndexError(id)
        return index
