"""Color palette for the quiz canvas supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()

    @classmethod
    def from_name(cls, name: str) -> Theme:
        try:
            return cls[name.strip().upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown theme '{name}'.") from exc


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme.

    Values are ``#RRGGBB`` or ``#AARRGGBB`` strings, which ``QColor`` accepts.
    """
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the canvas."""

    BACKGROUND = ThemeColors(
        light="#F0F0F0",      # Light gray
        dark="#1E1E1E"
    )

    TEXT_PRIMARY = ThemeColors(
        light="#323232",
        dark="#F5F5F5"
    )

    # Option boxes
    OPTION_BG = ThemeColors(
        light="#FFFFFF",
        dark="#2D2D2D"
    )

    OPTION_BORDER = ThemeColors(
        light="#969696",
        dark="#555555"
    )

    OPTION_HOVER_BG = ThemeColors(
        light="#96C8DCFF",    # Translucent light blue
        dark="#964A9EFF"
    )

    OPTION_SELECTED_BG = ThemeColors(
        light="#C86496FF",    # Stronger blue
        dark="#C84A9EFF"
    )

    # Feedback highlights
    CORRECT_BG = ThemeColors(
        light="#96FF96",
        dark="#2E7D32"
    )

    CORRECT_BORDER = ThemeColors(
        light="#009600",
        dark="#6FCF6F"
    )

    INCORRECT_BG = ThemeColors(
        light="#FF9696",
        dark="#8E2424"
    )

    INCORRECT_BORDER = ThemeColors(
        light="#960000",
        dark="#FF6B6B"
    )

    CORRECT_OVERLAY = ThemeColors(
        light="#6400FF00",
        dark="#6400C800"
    )

    INCORRECT_OVERLAY = ThemeColors(
        light="#64FF0000",
        dark="#64C80000"
    )

    OVERLAY_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#FFFFFF"
    )

    # Cursor trail
    CURSOR_TRAIL = ThemeColors(
        light="#FF6496",      # Pink
        dark="#FF8AB4"
    )

    CURSOR_HEAD = ThemeColors(
        light="#FF3264",
        dark="#FF5C8A"
    )

    # Result screen
    PASSED_HEADLINE = ThemeColors(
        light="#FFC107",      # Gold
        dark="#FFD54F"
    )

    FAILED_HEADLINE = ThemeColors(
        light="#0096FF",      # Blue
        dark="#4A9EFF"
    )

    SPARKLE = ThemeColors(
        light="#C8FFFF00",
        dark="#C8FFFF66"
    )

    BUBBLE = ThemeColors(
        light="#500096FF",
        dark="#504A9EFF"
    )

    RESTART_BUTTON_BG = ThemeColors(
        light="#C83232",
        dark="#B22222"
    )

    RESTART_BUTTON_HOVER_BG = ThemeColors(
        light="#FF6464",
        dark="#E05555"
    )

    RESTART_BUTTON_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#FFFFFF"
    )
