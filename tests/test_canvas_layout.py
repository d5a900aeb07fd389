"""Tests for canvas geometry and click mapping."""

import pytest

from quiz_canvas.constants.ui_constants import CANVAS_HEIGHT, CANVAS_WIDTH
from quiz_canvas.ui.canvas_layout import Rect, option_index_at, option_rect, restart_button_rect


class TestRect:
    def test_contains_is_exclusive_at_edges(self):
        rect = Rect(10, 20, 100, 50)
        assert rect.contains(11, 21)
        assert not rect.contains(10, 30)
        assert not rect.contains(110, 30)
        assert not rect.contains(50, 70)

    def test_from_center(self):
        rect = Rect.from_center(90, 25, 180, 50)
        assert rect == Rect(0, 0, 180, 50)


class TestOptionHitTesting:
    def test_option_boxes_stack_below_prompt(self):
        assert option_rect(0, CANVAS_WIDTH) == Rect(50, 150, 700, 50)
        assert option_rect(3, CANVAS_WIDTH) == Rect(50, 330, 700, 50)

    @pytest.mark.parametrize(
        ("point", "expected"),
        [
            ((400, 175), 0),
            ((60, 215), 1),
            ((740, 290), 2),
            ((400, 355), 3),
        ],
    )
    def test_point_inside_option(self, point, expected):
        assert option_index_at(*point, option_count=4, canvas_width=CANVAS_WIDTH) == expected

    @pytest.mark.parametrize(
        "point",
        [
            (400, 100),  # prompt
            (400, 205),  # gap between A and B
            (20, 175),  # left margin
            (400, 500),  # below the last option
        ],
    )
    def test_point_outside_options(self, point):
        assert option_index_at(*point, option_count=4, canvas_width=CANVAS_WIDTH) is None

    def test_only_existing_options_are_hit(self):
        assert option_index_at(400, 295, option_count=2, canvas_width=CANVAS_WIDTH) is None


class TestRestartButton:
    def test_centered_near_bottom(self):
        rect = restart_button_rect(CANVAS_WIDTH, CANVAS_HEIGHT)
        assert rect == Rect(310, 525, 180, 50)
        assert rect.contains(400, 550)
        assert not rect.contains(400, 500)
