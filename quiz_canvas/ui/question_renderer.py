"""Text formatting for questions shown on the canvas."""

from __future__ import annotations

from quiz_canvas.constants.ui_constants import PROGRESS_TEMPLATE
from quiz_canvas.core.markdown_renderer import renderer
from quiz_canvas.core.models import Option


def render_prompt_html(prompt: str) -> str:
    """Render a question prompt (Markdown allowed) as an HTML fragment for QTextDocument."""
    return renderer.render_fragment(prompt)


def format_option_text(option: Option) -> str:
    return f"{option.label}. {option.text}"


def format_progress(current_index: int, total: int) -> str:
    return PROGRESS_TEMPLATE.format(current=current_index + 1, total=total)
