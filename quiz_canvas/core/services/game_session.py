"""Mutable state of one quiz attempt."""

from __future__ import annotations

from quiz_canvas.core.models import QuizPhase, QuizResult


class QuizSession:
    """Position, phase and result of the attempt in progress."""

    def __init__(self) -> None:
        self.current_index: int = 0
        self.phase: QuizPhase = QuizPhase.ANSWERING
        self.selected_label: str | None = None
        self.result: QuizResult | None = None
        # Bumped whenever a pending feedback timer must be ignored.
        self._generation: int = 0

    @property
    def generation(self) -> int:
        return self._generation

    def next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def enter_feedback(self, label: str, is_correct: bool) -> None:
        self.selected_label = label
        self.phase = QuizPhase.CORRECT_FEEDBACK if is_correct else QuizPhase.INCORRECT_FEEDBACK

    def move_to_next_question(self) -> None:
        self.current_index += 1
        self.selected_label = None
        self.phase = QuizPhase.ANSWERING

    def finish(self, result: QuizResult) -> None:
        self.result = result
        self.selected_label = None
        self.phase = QuizPhase.FINISHED

    def reset(self) -> None:
        self.current_index = 0
        self.phase = QuizPhase.ANSWERING
        self.selected_label = None
        self.result = None
        self.next_generation()
