"""Qt widget that paints the quiz and turns clicks into controller events."""

from __future__ import annotations

from collections import deque
import math
import random

from PySide6.QtCore import QPointF, QRectF, Qt, QTimer
from PySide6.QtGui import (
    QColor,
    QFont,
    QMouseEvent,
    QPainter,
    QPaintEvent,
    QPen,
    QTextDocument,
    QTextOption,
)
from PySide6.QtWidgets import QWidget

from quiz_canvas.constants.ui_constants import (
    BUBBLE_COUNT,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    CONTENT_MARGIN_X,
    CORRECT_FEEDBACK_TEXT,
    CURSOR_TRAIL_LENGTH,
    FAILED_HEADLINE_TEMPLATE,
    FAILED_MESSAGE,
    FRAME_INTERVAL_MS,
    INCORRECT_FEEDBACK_TEXT,
    OPTION_CORNER_RADIUS,
    PASSED_HEADLINE_TEMPLATE,
    PASSED_MESSAGE,
    PROGRESS_Y,
    PROMPT_Y,
    RESTART_BUTTON_TEXT,
    SPARKLE_COUNT,
    WINDOW_TITLE,
)
from quiz_canvas.core.models import QuestionView, QuizPhase, QuizSnapshot
from quiz_canvas.core.quiz_controller import QuizController
from quiz_canvas.styling.color_palette import ColorPalette, Theme, ThemeColors
from quiz_canvas.ui.canvas_layout import Rect, option_rect, restart_button_rect
from quiz_canvas.ui.click_mapper import dispatch_click
from quiz_canvas.ui.question_renderer import format_option_text, format_progress, render_prompt_html


def _to_qrectf(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.width, rect.height)


def _pixel_font(pixel_size: int, bold: bool = False) -> QFont:
    font = QFont()
    font.setPixelSize(max(1, pixel_size))
    font.setBold(bold)
    return font


class QuizCanvas(QWidget):
    """Single-screen quiz view.

    Every frame the widget polls ``QuizController.snapshot()`` and draws the
    matching screen. Hover and cursor effects are derived here from the
    pointer position; the controller only ever sees option labels and
    restart requests.
    """

    def __init__(
        self,
        controller: QuizController,
        theme: Theme = Theme.LIGHT,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self._theme = theme
        self._pointer: QPointF | None = None
        self._trail: deque[QPointF] = deque(maxlen=CURSOR_TRAIL_LENGTH)
        self._frame_count: int = 0
        self._rng = random.Random()

        self._prompt_document = QTextDocument(self)
        self._prompt_source: str | None = None

        self.setWindowTitle(WINDOW_TITLE)
        self.setFixedSize(CANVAS_WIDTH, CANVAS_HEIGHT)
        self.setMouseTracking(True)
        self._configure_frame_timer()

    def _configure_frame_timer(self) -> None:
        self.frame_timer = QTimer(self)
        self.frame_timer.setInterval(FRAME_INTERVAL_MS)
        self.frame_timer.timeout.connect(self._advance_frame)
        self.frame_timer.start()

    def _advance_frame(self) -> None:
        self._frame_count += 1
        snapshot = self.controller.snapshot()
        if snapshot.phase is QuizPhase.ANSWERING and self._pointer is not None:
            self._trail.append(QPointF(self._pointer))
        elif snapshot.phase is not QuizPhase.ANSWERING:
            self._trail.clear()
        self._update_cursor_shape(snapshot)
        self.update()

    # --- Input ---

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        self._pointer = QPointF(event.position())
        super().mouseMoveEvent(event)

    def leaveEvent(self, event) -> None:
        self._pointer = None
        self._trail.clear()
        super().leaveEvent(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return

        pos = event.position()
        dispatch_click(self.controller, pos.x(), pos.y(), self.width(), self.height())
        self.update()

    def _update_cursor_shape(self, snapshot: QuizSnapshot) -> None:
        if snapshot.phase is QuizPhase.ANSWERING:
            self.setCursor(Qt.BlankCursor)
        elif snapshot.phase is QuizPhase.FINISHED and self._pointer_in(
            restart_button_rect(self.width(), self.height())
        ):
            self.setCursor(Qt.PointingHandCursor)
        else:
            self.setCursor(Qt.ArrowCursor)

    def _pointer_in(self, rect: Rect) -> bool:
        return self._pointer is not None and rect.contains(self._pointer.x(), self._pointer.y())

    # --- Painting ---

    def _color(self, entry: ThemeColors) -> QColor:
        return QColor(entry.get(self._theme))

    def paintEvent(self, event: QPaintEvent) -> None:
        snapshot = self.controller.snapshot()
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), self._color(ColorPalette.BACKGROUND))

        phase = snapshot.phase
        if phase is QuizPhase.ANSWERING:
            self._draw_quiz(painter, snapshot)
        elif phase.is_feedback:
            self._draw_quiz(painter, snapshot)
            self._draw_feedback(painter, snapshot)
        elif phase is QuizPhase.FINISHED:
            self._draw_result(painter, snapshot)

        if phase is QuizPhase.ANSWERING:
            self._draw_cursor_trail(painter)
        painter.end()

    def _draw_quiz(self, painter: QPainter, snapshot: QuizSnapshot) -> None:
        question = snapshot.question
        if question is None:
            return
        content_width = self.width() - 2 * CONTENT_MARGIN_X

        painter.setPen(self._color(ColorPalette.TEXT_PRIMARY))
        painter.setFont(_pixel_font(24))
        painter.drawText(
            QRectF(CONTENT_MARGIN_X, PROGRESS_Y - 20, content_width, 40),
            Qt.AlignLeft | Qt.AlignVCenter,
            format_progress(snapshot.current_index, snapshot.total),
        )

        self._draw_prompt(painter, question.prompt, content_width)

        hover_enabled = snapshot.phase is QuizPhase.ANSWERING
        for index, option in enumerate(question.options):
            rect = option_rect(index, self.width())
            if hover_enabled and self._pointer_in(rect):
                fill = ColorPalette.OPTION_HOVER_BG
            elif snapshot.selected_label == option.label:
                fill = ColorPalette.OPTION_SELECTED_BG
            else:
                fill = ColorPalette.OPTION_BG
            self._draw_option_box(painter, rect, format_option_text(option), fill, ColorPalette.OPTION_BORDER, 1)

    def _draw_prompt(self, painter: QPainter, prompt: str, content_width: int) -> None:
        if prompt != self._prompt_source:
            text_color = self._color(ColorPalette.TEXT_PRIMARY).name()
            self._prompt_document.setDefaultFont(_pixel_font(28))
            self._prompt_document.setDefaultStyleSheet(f"p {{ color: {text_color}; margin: 0; }}")
            self._prompt_document.setHtml(render_prompt_html(prompt))
            self._prompt_document.setTextWidth(content_width)
            self._prompt_source = prompt

        painter.save()
        painter.translate(CONTENT_MARGIN_X, PROMPT_Y - 20)
        self._prompt_document.drawContents(painter)
        painter.restore()

    def _draw_option_box(
        self,
        painter: QPainter,
        rect: Rect,
        text: str,
        fill: ThemeColors,
        border: ThemeColors,
        border_width: int,
    ) -> None:
        painter.save()
        painter.setBrush(self._color(fill))
        painter.setPen(QPen(self._color(border), border_width))
        painter.drawRoundedRect(_to_qrectf(rect), OPTION_CORNER_RADIUS, OPTION_CORNER_RADIUS)
        painter.setPen(self._color(ColorPalette.TEXT_PRIMARY))
        painter.setFont(_pixel_font(20))
        painter.drawText(
            QRectF(rect.x + 15, rect.y, rect.width - 30, rect.height),
            Qt.AlignLeft | Qt.AlignVCenter,
            text,
        )
        painter.restore()

    def _draw_feedback(self, painter: QPainter, snapshot: QuizSnapshot) -> None:
        question = snapshot.question
        if question is not None:
            self._highlight_answers(painter, question, snapshot.selected_label)

        if snapshot.phase is QuizPhase.CORRECT_FEEDBACK:
            overlay, message = ColorPalette.CORRECT_OVERLAY, CORRECT_FEEDBACK_TEXT
        else:
            overlay, message = ColorPalette.INCORRECT_OVERLAY, INCORRECT_FEEDBACK_TEXT
        painter.fillRect(self.rect(), self._color(overlay))

        scale = math.sin(self._frame_count * 0.2) * 0.1 + 1
        painter.save()
        painter.setPen(self._color(ColorPalette.OVERLAY_TEXT))
        painter.setFont(_pixel_font(int(44 * scale), bold=True))
        option = QTextOption(Qt.AlignCenter)
        option.setWrapMode(QTextOption.WordWrap)
        painter.drawText(QRectF(self.rect()), message, option)
        painter.restore()

    def _highlight_answers(
        self, painter: QPainter, question: QuestionView, selected_label: str | None
    ) -> None:
        for index, option in enumerate(question.options):
            rect = option_rect(index, self.width())
            text = format_option_text(option)
            if option.text == question.correct_text:
                self._draw_option_box(
                    painter, rect, text, ColorPalette.CORRECT_BG, ColorPalette.CORRECT_BORDER, 3
                )
            elif option.label == selected_label:
                self._draw_option_box(
                    painter, rect, text, ColorPalette.INCORRECT_BG, ColorPalette.INCORRECT_BORDER, 3
                )

    def _draw_result(self, painter: QPainter, snapshot: QuizSnapshot) -> None:
        result = snapshot.result
        if result is None:
            return
        width, height = self.width(), self.height()

        if result.passed:
            headline = PASSED_HEADLINE_TEMPLATE.format(score=result.score)
            headline_color, message = ColorPalette.PASSED_HEADLINE, PASSED_MESSAGE
            self._draw_sparkles(painter)
        else:
            headline = FAILED_HEADLINE_TEMPLATE.format(score=result.score)
            headline_color, message = ColorPalette.FAILED_HEADLINE, FAILED_MESSAGE
            self._draw_bubbles(painter)

        painter.setPen(self._color(headline_color))
        painter.setFont(_pixel_font(44, bold=True))
        painter.drawText(QRectF(0, height / 2 - 140, width, 80), Qt.AlignCenter, headline)

        painter.setPen(self._color(ColorPalette.TEXT_PRIMARY))
        painter.setFont(_pixel_font(24))
        painter.drawText(QRectF(0, height / 2 - 30, width, 60), Qt.AlignCenter, message)

        self._draw_restart_button(painter)

    def _draw_sparkles(self, painter: QPainter) -> None:
        painter.save()
        painter.setPen(Qt.NoPen)
        painter.setBrush(self._color(ColorPalette.SPARKLE))
        for i in range(SPARKLE_COUNT):
            size = abs(math.sin(self._frame_count * 0.1 + i) * 10 + 5)
            center = QPointF(self._rng.uniform(0, self.width()), self._rng.uniform(0, self.height()))
            painter.drawEllipse(center, size / 2, size / 2)
        painter.restore()

    def _draw_bubbles(self, painter: QPainter) -> None:
        width, height = self.width(), self.height()
        painter.save()
        painter.setPen(Qt.NoPen)
        painter.setBrush(self._color(ColorPalette.BUBBLE))
        for i in range(BUBBLE_COUNT):
            size = (i * 5 + self._frame_count * 0.5) % 50 + 10
            x = width / 2 + math.sin(self._frame_count * 0.05 + i) * 100
            y = height - ((self._frame_count * 3 + i * 50) % (height + 200) - 100)
            painter.drawEllipse(QPointF(x, y), size / 2, size / 2)
        painter.restore()

    def _draw_restart_button(self, painter: QPainter) -> None:
        rect = restart_button_rect(self.width(), self.height())
        fill = ColorPalette.RESTART_BUTTON_HOVER_BG if self._pointer_in(rect) else ColorPalette.RESTART_BUTTON_BG
        painter.save()
        painter.setPen(Qt.NoPen)
        painter.setBrush(self._color(fill))
        painter.drawRoundedRect(_to_qrectf(rect), 10, 10)
        painter.setPen(self._color(ColorPalette.RESTART_BUTTON_TEXT))
        painter.setFont(_pixel_font(22))
        painter.drawText(_to_qrectf(rect), Qt.AlignCenter, RESTART_BUTTON_TEXT)
        painter.restore()

    def _draw_cursor_trail(self, painter: QPainter) -> None:
        if self._pointer is None:
            return
        painter.save()
        painter.setPen(Qt.NoPen)
        trail_color = self._color(ColorPalette.CURSOR_TRAIL)
        count = len(self._trail)
        for i, point in enumerate(self._trail):
            fraction = i / count
            diameter = 2 + fraction * 8
            trail_color.setAlpha(int(fraction * 150))
            painter.setBrush(trail_color)
            painter.drawEllipse(point, diameter / 2, diameter / 2)

        painter.setBrush(self._color(ColorPalette.CURSOR_HEAD))
        painter.drawEllipse(self._pointer, 7.5, 7.5)
        painter.restore()
