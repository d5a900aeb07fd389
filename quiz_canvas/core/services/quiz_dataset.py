"""Ordered, validated collection of quiz questions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

from quiz_canvas.constants.quiz_constants import ANSWER_COLUMN, OPTION_COLUMNS, QUESTION_COLUMN
from quiz_canvas.core.models import Option, Question, label_for_index


class MalformedDatasetError(ValueError):
    """Raised when quiz data is empty or a record is invalid."""


class QuizDataset:
    """Holds the questions of one quiz in their original order."""

    def __init__(self, questions: Iterable[Question]) -> None:
        self._questions: tuple[Question, ...] = tuple(questions)
        if not self._questions:
            raise ValueError("Quiz must contain at least one question.")

    @classmethod
    def load(
        cls,
        rows: Iterable[Mapping[str, object]],
        option_columns: Sequence[str] = OPTION_COLUMNS,
    ) -> QuizDataset:
        """Build a dataset from raw records, one question per record.

        Each record must provide the question, every option column and the
        answer as non-empty strings, and the answer must repeat the text of
        one of the options.

        Raises:
            MalformedDatasetError: If there are no records or a record is invalid.
        """
        if len(option_columns) < 2:
            raise ValueError("A question needs at least two option columns.")

        questions = [
            cls._parse_row(row, row_number, option_columns)
            for row_number, row in enumerate(rows, start=1)
        ]
        if not questions:
            raise MalformedDatasetError("Quiz data did not contain any questions.")
        return cls(questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __getitem__(self, index: int) -> Question:
        return self._questions[index]

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @classmethod
    def _parse_row(
        cls,
        row: Mapping[str, object],
        row_number: int,
        option_columns: Sequence[str],
    ) -> Question:
        prompt = cls._require_text(row, QUESTION_COLUMN, row_number)
        options = tuple(
            Option(label=label_for_index(idx), text=cls._require_text(row, column, row_number))
            for idx, column in enumerate(option_columns)
        )
        answer = cls._require_text(row, ANSWER_COLUMN, row_number)
        if not any(option.text == answer for option in options):
            raise MalformedDatasetError(
                f"Row {row_number}: answer '{answer}' does not match any option."
            )
        return Question(prompt=prompt, options=options, correct_text=answer)

    @staticmethod
    def _require_text(row: Mapping[str, object], column: str, row_number: int) -> str:
        value = row.get(column)
        if value is None:
            raise MalformedDatasetError(f"Row {row_number}: missing field '{column}'.")
        if not isinstance(value, str):
            raise MalformedDatasetError(f"Row {row_number}: field '{column}' must be text.")
        cleaned = value.strip()
        if not cleaned:
            raise MalformedDatasetError(f"Row {row_number}: field '{column}' is empty.")
        return cleaned
