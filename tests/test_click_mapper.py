"""Tests for turning canvas clicks into controller events."""

from quiz_canvas.constants.ui_constants import CANVAS_HEIGHT, CANVAS_WIDTH
from quiz_canvas.core.models import QuizPhase
from quiz_canvas.ui.click_mapper import dispatch_click

CORRECT = ["B", "C", "A", "D"]
INSIDE_RESTART = (400, 550)


def click(controller, px, py):
    return dispatch_click(controller, px, py, CANVAS_WIDTH, CANVAS_HEIGHT)


def option_center(index):
    return 400, 175 + 60 * index


def finish_quiz(controller, scheduler):
    for label in CORRECT:
        assert controller.select_option(label)
        scheduler.advance_time(controller.feedback_delay_ms)
    assert controller.phase is QuizPhase.FINISHED


class TestAnsweringClicks:
    def test_click_on_option_selects_its_label(self, controller):
        assert click(controller, *option_center(1))
        snap = controller.snapshot()
        assert snap.phase is QuizPhase.CORRECT_FEEDBACK
        assert snap.selected_label == "B"

    def test_click_on_wrong_option(self, controller):
        assert click(controller, *option_center(3))
        snap = controller.snapshot()
        assert snap.phase is QuizPhase.INCORRECT_FEEDBACK
        assert snap.selected_label == "D"

    def test_click_in_gap_between_options_is_ignored(self, controller):
        assert not click(controller, 400, 205)
        assert controller.phase is QuizPhase.ANSWERING

    def test_click_on_option_edge_is_ignored(self, controller):
        assert not click(controller, 50, 175)
        assert controller.phase is QuizPhase.ANSWERING

    def test_restart_area_does_nothing_while_answering(self, controller):
        assert not click(controller, *INSIDE_RESTART)
        snap = controller.snapshot()
        assert snap.phase is QuizPhase.ANSWERING
        assert snap.current_index == 0


class TestFeedbackClicks:
    def test_clicks_ignored_during_feedback(self, controller, scheduler):
        assert click(controller, *option_center(1))
        assert not click(controller, *option_center(0))
        snap = controller.snapshot()
        assert snap.selected_label == "B"
        assert scheduler.pending_count == 1


class TestFinishedClicks:
    def test_restart_button_restarts(self, controller, scheduler, dataset):
        finish_quiz(controller, scheduler)
        assert click(controller, *INSIDE_RESTART)
        snap = controller.snapshot()
        assert snap.phase is QuizPhase.ANSWERING
        assert snap.current_index == 0
        assert not any(question.answered for question in dataset)

    def test_click_outside_button_keeps_result(self, controller, scheduler):
        finish_quiz(controller, scheduler)
        assert not click(controller, 400, 500)
        assert not click(controller, *option_center(0))
        assert controller.snapshot().score == 100.0
