"""
Answer grading.

Exact string match after trimming surrounding whitespace and lowercasing
both sides. No partial credit.
"""

from dataclasses import dataclass

from quizzer.store import Quiz


@dataclass
class AnswerResult:
    """Result of checking an answer."""
    correct: bool
    feedback: str
    user_answer: str
    correct_answer: str


def normalize_answer(text: str) -> str:
    return text.strip().lower()


def check_answer(quiz: Quiz, answer: str) -> AnswerResult:
    """Grade a free-text answer against the quiz's stored answer."""
    is_correct = normalize_answer(answer) == normalize_answer(quiz.answer)

    return AnswerResult(
        correct=is_correct,
        feedback="Correct" if is_correct else "Incorrect",
        user_answer=answer,
        correct_answer=quiz.answer,
    )
