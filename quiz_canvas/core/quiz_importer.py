"""Utilities for importing quizzes from a CSV file.

File format (header row required, one question per row):

    question,optionA,optionB,optionC,optionD,answer
    What does len('abc') return?,2,3,4,Error,3

The ``answer`` column repeats the text of the correct option rather than its
letter, so reordering the option columns never changes which one is correct.
Extra columns are ignored.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Sequence
from pathlib import Path

from quiz_canvas.constants.quiz_constants import ANSWER_COLUMN, OPTION_COLUMNS, QUESTION_COLUMN
from quiz_canvas.core.services.quiz_dataset import MalformedDatasetError, QuizDataset

logger = logging.getLogger(__name__)


def load_dataset_from_file(
    file_path: Path,
    option_columns: Sequence[str] = OPTION_COLUMNS,
    encoding: str = "utf-8-sig",
) -> QuizDataset:
    """Read a CSV quiz file into a validated dataset.

    Raises:
        OSError: If the file cannot be read.
        MalformedDatasetError: If the header or any row is invalid.
    """
    with file_path.open(newline="", encoding=encoding) as handle:
        reader = csv.DictReader(handle)
        _check_header(reader.fieldnames, option_columns)
        reader.fieldnames = [name.strip() for name in reader.fieldnames]
        dataset = QuizDataset.load(reader, option_columns=option_columns)

    logger.info("Loaded %d questions from %s", len(dataset), file_path)
    return dataset


def _check_header(fieldnames: Sequence[str] | None, option_columns: Sequence[str]) -> None:
    if not fieldnames:
        raise MalformedDatasetError("Quiz file is empty or has no header row.")
    present = {name.strip() for name in fieldnames if name}
    required = [QUESTION_COLUMN, *option_columns, ANSWER_COLUMN]
    missing = [column for column in required if column not in present]
    if missing:
        raise MalformedDatasetError(f"Quiz file is missing columns: {', '.join(missing)}.")
