"""Geometry of the quiz canvas shared by painting and hit-testing.

Kept free of Qt types so click mapping can be checked without a display.
"""

from __future__ import annotations

from dataclasses import dataclass

from quiz_canvas.constants.ui_constants import (
    CONTENT_MARGIN_X,
    OPTION_GAP,
    OPTION_HEIGHT,
    OPTIONS_TOP_Y,
    RESTART_BUTTON_BOTTOM_OFFSET,
    RESTART_BUTTON_HEIGHT,
    RESTART_BUTTON_WIDTH,
)


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle in canvas pixels."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_center(cls, center_x: float, center_y: float, width: float, height: float) -> Rect:
        return cls(center_x - width / 2, center_y - height / 2, width, height)

    def contains(self, px: float, py: float) -> bool:
        # Edges are outside, matching how the option boxes are drawn.
        return self.x < px < self.x + self.width and self.y < py < self.y + self.height


def option_rect(index: int, canvas_width: int) -> Rect:
    """Box of the option at ``index`` (0-based), top to bottom."""
    return Rect(
        x=CONTENT_MARGIN_X,
        y=OPTIONS_TOP_Y + index * OPTION_HEIGHT,
        width=canvas_width - 2 * CONTENT_MARGIN_X,
        height=OPTION_HEIGHT - OPTION_GAP,
    )


def option_index_at(px: float, py: float, option_count: int, canvas_width: int) -> int | None:
    """Return the option under the pointer, or None when the point misses every box."""
    for index in range(option_count):
        if option_rect(index, canvas_width).contains(px, py):
            return index
    return None


def restart_button_rect(canvas_width: int, canvas_height: int) -> Rect:
    return Rect.from_center(
        canvas_width / 2,
        canvas_height - RESTART_BUTTON_BOTTOM_OFFSET,
        RESTART_BUTTON_WIDTH,
        RESTART_BUTTON_HEIGHT,
    )
