"""Helper functions for message dialogs."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


def show_error(parent: QWidget | None, title: str, message: str) -> None:
    """Show error dialog.

    Args:
        parent: Parent widget for the dialog, or None before any window exists
        title: Dialog title
        message: Error message
    """
    QMessageBox.critical(parent, title, message)
