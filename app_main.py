"""Application entry point for QuizCanvas."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from quiz_canvas.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, CSV_FORMAT_HELP
from quiz_canvas.constants.quiz_constants import DEFAULT_DATASET_PATH, FEEDBACK_DELAY_MS
from quiz_canvas.constants.ui_constants import LOAD_FAILED_TITLE
from quiz_canvas.core.quiz_controller import QuizController
from quiz_canvas.core.quiz_importer import load_dataset_from_file
from quiz_canvas.core.services.quiz_dataset import MalformedDatasetError
from quiz_canvas.styling.color_palette import Theme
from quiz_canvas.ui.dialog_helpers import show_error
from quiz_canvas.ui.qt_scheduler import QtScheduler
from quiz_canvas.ui.quiz_canvas import QuizCanvas
from quiz_canvas.utils.logging_config import configure_logging


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quiz-canvas", description=APP_ABOUT_TEXT)
    parser.add_argument(
        "dataset",
        nargs="?",
        default=DEFAULT_DATASET_PATH,
        help=f"CSV file with the quiz questions (default: {DEFAULT_DATASET_PATH})",
    )
    parser.add_argument(
        "--delay-ms",
        type=_non_negative_int,
        default=FEEDBACK_DELAY_MS,
        help="How long answer feedback stays on screen, in milliseconds",
    )
    parser.add_argument("--theme", choices=[theme.name.lower() for theme in Theme], default="light")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="INFO")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION} ({APP_LICENSE})")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Load the quiz, then launch the Qt canvas. Refuses to start on bad data."""
    args = _build_parser().parse_args(argv)
    logger = configure_logging(args.log_level)
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    app = QApplication(sys.argv[:1])

    try:
        dataset = load_dataset_from_file(Path(args.dataset))
    except (OSError, MalformedDatasetError) as exc:
        logger.error("Could not load quiz from %s: %s", args.dataset, exc)
        show_error(None, LOAD_FAILED_TITLE, f"{exc}\n\n{CSV_FORMAT_HELP}")
        sys.exit(1)

    scheduler = QtScheduler(app)
    controller = QuizController(dataset, scheduler, feedback_delay_ms=args.delay_ms)
    window = QuizCanvas(controller=controller, theme=Theme.from_name(args.theme))
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
