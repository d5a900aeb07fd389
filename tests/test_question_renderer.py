"""Tests for prompt and option text formatting."""

import pytest

from quiz_canvas.core.markdown_renderer import MarkdownRenderer
from quiz_canvas.core.models import Option
from quiz_canvas.styling import ColorPalette, Theme
from quiz_canvas.ui.question_renderer import format_option_text, format_progress, render_prompt_html


class TestPromptRendering:
    def test_markdown_emphasis_and_code(self):
        html = render_prompt_html("Which is **immutable**, `list` or `tuple`?")
        assert "<strong>immutable</strong>" in html
        assert "<code>list</code>" in html

    def test_raw_html_is_escaped(self):
        html = render_prompt_html("<script>alert(1)</script>")
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_blank_prompt_placeholder(self):
        assert "No question text" in MarkdownRenderer().render_fragment("   ")


class TestTextFormatting:
    def test_option_text(self):
        assert format_option_text(Option("C", "Paris")) == "C. Paris"

    def test_progress_is_one_based(self):
        assert format_progress(0, 5) == "Question 1 / 5"
        assert format_progress(4, 5) == "Question 5 / 5"


class TestPalette:
    def test_theme_lookup(self):
        assert Theme.from_name("Dark") is Theme.DARK
        assert ColorPalette.BACKGROUND.get(Theme.LIGHT) == "#F0F0F0"
        assert ColorPalette.BACKGROUND.get(Theme.DARK) == "#1E1E1E"

    def test_unknown_theme(self):
        with pytest.raises(ValueError):
            Theme.from_name("neon")
