"""State machine that drives a quiz from the first question to the result screen."""

from __future__ import annotations

import logging
from threading import RLock

from quiz_canvas.constants.quiz_constants import FEEDBACK_DELAY_MS, PASS_SCORE_THRESHOLD
from quiz_canvas.core.models import QuestionView, QuizPhase, QuizSnapshot
from quiz_canvas.core.services.game_session import QuizSession
from quiz_canvas.core.services.quiz_dataset import QuizDataset
from quiz_canvas.core.services.scheduler import Scheduler
from quiz_canvas.core.services.scoreboard import summarize

logger = logging.getLogger(__name__)


class QuizController:
    """Owns the quiz session and the answer state of every question.

    Input layers call ``select_option`` and ``restart``; renderers poll
    ``snapshot``. After an answer the controller asks the scheduler to call
    back after ``feedback_delay_ms`` and then moves on to the next question.
    """

    def __init__(
        self,
        dataset: QuizDataset,
        scheduler: Scheduler,
        feedback_delay_ms: int = FEEDBACK_DELAY_MS,
        pass_threshold: float = PASS_SCORE_THRESHOLD,
    ) -> None:
        if feedback_delay_ms < 0:
            raise ValueError("Feedback delay must not be negative.")
        # Re-entrant: the timer callback calls advance() while holding it.
        self._lock = RLock()
        self._dataset = dataset
        self._scheduler = scheduler
        self._feedback_delay_ms = feedback_delay_ms
        self._pass_threshold = pass_threshold
        self._session = QuizSession()
        self._finish_if_complete()

    @property
    def feedback_delay_ms(self) -> int:
        return self._feedback_delay_ms

    @property
    def phase(self) -> QuizPhase:
        with self._lock:
            return self._session.phase

    def select_option(self, label: str) -> bool:
        """Answer the current question. Returns False when the click is ignored."""
        with self._lock:
            session = self._session
            if session.phase is not QuizPhase.ANSWERING:
                return False
            if session.current_index >= len(self._dataset):
                return False

            question = self._dataset[session.current_index]
            if question.answered:
                return False

            option = question.option_for_label(label)
            if option is None:
                logger.warning(
                    "Ignoring unknown option %r for question %d", label, session.current_index + 1
                )
                return False

            question.record_answer(option.text)
            session.enter_feedback(option.label, question.is_correct)
            token = session.next_generation()
            logger.debug(
                "Question %d answered with %s (%s)",
                session.current_index + 1,
                option.label,
                session.phase.name,
            )

        self._scheduler.schedule_once(
            self._feedback_delay_ms, lambda: self._handle_feedback_elapsed(token)
        )
        return True

    def advance(self) -> bool:
        """Leave the feedback phase and show the next question (or the result)."""
        with self._lock:
            session = self._session
            if not session.phase.is_feedback:
                return False
            session.next_generation()
            session.move_to_next_question()
            self._finish_if_complete()
            return True

    def restart(self) -> None:
        """Clear every answer and return to the first question."""
        with self._lock:
            for question in self._dataset:
                question.clear_answer()
            self._session.reset()
            logger.debug("Quiz restarted")
            self._finish_if_complete()

    def snapshot(self) -> QuizSnapshot:
        with self._lock:
            session = self._session
            question = None
            if session.current_index < len(self._dataset):
                question = QuestionView.from_question(self._dataset[session.current_index])
            return QuizSnapshot(
                current_index=session.current_index,
                total=len(self._dataset),
                phase=session.phase,
                question=question,
                selected_label=session.selected_label,
                result=session.result if session.phase is QuizPhase.FINISHED else None,
            )

    def _handle_feedback_elapsed(self, token: int) -> None:
        with self._lock:
            if token != self._session.generation:
                logger.debug("Discarding stale feedback timer")
                return
            self.advance()

    def _finish_if_complete(self) -> None:
        session = self._session
        if session.phase is not QuizPhase.ANSWERING:
            return
        if session.current_index < len(self._dataset):
            return
        result = summarize(self._dataset.questions, self._pass_threshold)
        session.finish(result)
        logger.info(
            "Quiz finished: %d/%d correct (%.0f%%)", result.correct_count, result.total, result.score
        )
