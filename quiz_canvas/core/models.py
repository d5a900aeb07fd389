"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


def label_for_index(index: int) -> str:
    """Return the display label ("A", "B", ...) for an option position."""
    return chr(ord("A") + index)


class QuizPhase(Enum):
    """Phases of a quiz session."""

    ANSWERING = auto()
    CORRECT_FEEDBACK = auto()
    INCORRECT_FEEDBACK = auto()
    FINISHED = auto()

    @property
    def is_feedback(self) -> bool:
        return self in (QuizPhase.CORRECT_FEEDBACK, QuizPhase.INCORRECT_FEEDBACK)


@dataclass(frozen=True, slots=True)
class Option:
    """A single labelled answer option."""

    label: str
    text: str


@dataclass(slots=True)
class Question:
    """Multiple-choice question with the answer given during the current attempt."""

    prompt: str
    options: tuple[Option, ...]
    correct_text: str
    user_answer_text: str | None = None

    @property
    def answered(self) -> bool:
        return self.user_answer_text is not None

    @property
    def is_correct(self) -> bool:
        return self.answered and self.user_answer_text == self.correct_text

    def option_for_label(self, label: str) -> Option | None:
        return next((option for option in self.options if option.label == label), None)

    def record_answer(self, text: str) -> None:
        if self.answered:
            raise RuntimeError("Question has already been answered.")
        self.user_answer_text = text

    def clear_answer(self) -> None:
        self.user_answer_text = None


@dataclass(frozen=True, slots=True)
class QuestionView:
    """Read-only copy of a question handed to renderers."""

    prompt: str
    options: tuple[Option, ...]
    correct_text: str
    user_answer_text: str | None

    @classmethod
    def from_question(cls, question: Question) -> QuestionView:
        return cls(
            prompt=question.prompt,
            options=question.options,
            correct_text=question.correct_text,
            user_answer_text=question.user_answer_text,
        )


@dataclass(frozen=True, slots=True)
class QuizResult:
    """Final score of a completed attempt."""

    correct_count: int
    total: int
    score: float
    passed: bool


@dataclass(frozen=True, slots=True)
class QuizSnapshot:
    """Everything a renderer needs to draw one frame."""

    current_index: int
    total: int
    phase: QuizPhase
    question: QuestionView | None
    selected_label: str | None
    result: QuizResult | None

    @property
    def score(self) -> float | None:
        return self.result.score if self.result is not None else None
