"""Markdown rendering for question prompts.

Prompts in the CSV may use inline Markdown (``**bold**``, ``*italic*``,
`` `code` ``). The canvas paints the resulting HTML with ``QTextDocument``,
which understands a small HTML subset and no scripts, so raw HTML in the
source is escaped rather than passed through.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts Markdown prompt text into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html, "breaks": True})
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No question text.</em></p>"
        return self._markdown.render(sanitized)


renderer = MarkdownRenderer()
