"""
Test and play flows.

run_test asks a single quiz. PlaySession asks every quiz in random order,
without repeats, and stops at the first wrong answer or when nothing is left.
Both await the presenter for each answer, so only one question is ever
outstanding.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from loguru import logger

from quizzer.grading import AnswerResult, check_answer
from quizzer.presentation import Presenter
from quizzer.store import Quiz, QuizStore


def question_label(quiz: Quiz) -> str:
    return f"{quiz.question}?"


async def ask(quiz: Quiz, presenter: Presenter) -> AnswerResult:
    answer = await presenter.prompt_for_text(question_label(quiz))
    return check_answer(quiz, answer)


async def run_test(store: QuizStore, presenter: Presenter, id: Any) -> AnswerResult:
    """
    Ask the quiz at `id` once and report whether the answer was right.

    Raises InvalidIndexError before asking anything if `id` is not valid.
    """
    quiz = store.get_by_index(id)
    result = await ask(quiz, presenter)

    presenter.display_line("Your answer is:")
    if result.correct:
        presenter.display_banner("Correct", style="green")
    else:
        presenter.display_banner("Incorrect", style="red")
    return result


class PlayState(str, Enum):
    ASKING = "asking"
    FINISHED = "finished"


class EndReason(str, Enum):
    EXHAUSTED = "exhausted"
    WRONG_ANSWER = "wrong_answer"


@dataclass
class PlayResult:
    """Outcome of a finished play session."""
    score: int
    reason: EndReason
    asked: list[int] = field(default_factory=list)


class PlaySession:
    """
    One round of "play": every quiz, random order, sudden death.

    The pending ids are captured when the session is created; quizzes added
    or removed afterwards do not affect a session in progress.
    """

    def __init__(
        self,
        store: QuizStore,
        presenter: Presenter,
        rng: random.Random | None = None,
    ):
        self.store = store
        self.presenter = presenter
        self.rng = rng or random.Random()
        self.pending: list[int] = store.indices()
        self.score = 0
        self.asked: list[int] = []
        self._snapshot = {index: quiz for index, quiz in store.get_all()}
        self.state = PlayState.ASKING if self.pending else PlayState.FINISHED
        self._ran = False

    def _pick(self) -> int:
        """Position in `pending` of the next quiz, uniform over what is left."""
        return self.rng.randrange(len(self.pending))

    def _resolve(self, position: int) -> None:
        # Swap with last and pop; order of pending does not matter.
        self.pending[position] = self.pending[-1]
        self.pending.pop()

    async def run(self) -> PlayResult:
        if self._ran:
            raise RuntimeError("PlaySession can only be run once")
        self._ran = True

        logger.info(f"Play session started with {len(self.pending)} quizzes")
        reason = EndReason.EXHAUSTED

        while self.state is PlayState.ASKING:
            position = self._pick()
            index = self.pending[position]
            self.asked.append(index)
            logger.debug(f"Asking quiz {index} ({len(self.pending)} pending)")

            result = await ask(self._snapshot[index], self.presenter)

            if result.correct:
                self.score += 1
                self._resolve(position)
                self.presenter.display_line(f"CORRECT - Hits: {self.score}")
                if not self.pending:
                    self.state = PlayState.FINISHED
            else:
                reason = EndReason.WRONG_ANSWER
                self.state = PlayState.FINISHED

        self._report(reason)
        logger.info(f"Play session finished ({reason.value}), score {self.score}")
        return PlayResult(score=self.score, reason=reason, asked=list(self.asked))

    def _report(self, reason: EndReason) -> None:
        if reason is EndReason.WRONG_ANSWER:
            self.presenter.display_line("INCORRECT")
            self.presenter.display_line("Game over. Score:")
        else:
            self.presenter.display_line("No questions left. Game over. Score:")
        self.presenter.display_banner(str(self.score), style="blue")
