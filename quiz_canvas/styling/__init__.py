"""Styling module for the quiz canvas."""

from .color_palette import ColorPalette, Theme, ThemeColors

__all__ = ["ColorPalette", "Theme", "ThemeColors"]
