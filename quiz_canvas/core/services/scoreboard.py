"""Score calculation for a completed quiz attempt."""

from __future__ import annotations

from collections.abc import Sequence

from quiz_canvas.constants.quiz_constants import PASS_SCORE_THRESHOLD
from quiz_canvas.core.models import Question, QuizResult


def count_correct(questions: Sequence[Question]) -> int:
    return sum(1 for question in questions if question.is_correct)


def summarize(
    questions: Sequence[Question],
    pass_threshold: float = PASS_SCORE_THRESHOLD,
) -> QuizResult:
    """Return the percentage score and pass flag for the given questions."""
    if not questions:
        raise ValueError("Cannot score a quiz without questions.")

    correct = count_correct(questions)
    score = (correct / len(questions)) * 100
    return QuizResult(
        correct_count=correct,
        total=len(questions),
        score=score,
        passed=score >= pass_threshold,
    )
