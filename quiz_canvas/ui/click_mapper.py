"""Maps canvas clicks onto controller events."""

from __future__ import annotations

from quiz_canvas.core.models import QuizPhase
from quiz_canvas.core.quiz_controller import QuizController
from quiz_canvas.ui.canvas_layout import option_index_at, restart_button_rect


def dispatch_click(
    controller: QuizController,
    px: float,
    py: float,
    canvas_width: int,
    canvas_height: int,
) -> bool:
    """Send the click at (px, py) to the controller. Returns True if it was acted on."""
    snapshot = controller.snapshot()
    if snapshot.phase is QuizPhase.ANSWERING and snapshot.question is not None:
        index = option_index_at(px, py, len(snapshot.question.options), canvas_width)
        if index is None:
            return False
        return controller.select_option(snapshot.question.options[index].label)

    if snapshot.phase is QuizPhase.FINISHED:
        if restart_button_rect(canvas_width, canvas_height).contains(px, py):
            controller.restart()
            return True
    return False
