"""Shared fixtures for the quiz tests."""

import pytest

from quiz_canvas.core.quiz_controller import QuizController
from quiz_canvas.core.services.quiz_dataset import QuizDataset
from quiz_canvas.core.services.scheduler import ManualScheduler


def make_row(question, options, answer):
    """Build a raw record in the CSV column layout."""
    row = {"question": question, "answer": answer}
    for letter, text in zip("ABCD", options):
        row[f"option{letter}"] = text
    return row


@pytest.fixture
def rows():
    return [
        make_row("2 + 2?", ["3", "4", "5", "22"], "4"),
        make_row("Capital of France?", ["Rome", "Madrid", "Paris", "Berlin"], "Paris"),
        make_row("Largest planet?", ["Jupiter", "Mars", "Venus", "Earth"], "Jupiter"),
        make_row("Python keyword for functions?", ["func", "fn", "lambda", "def"], "def"),
    ]


@pytest.fixture
def dataset(rows):
    return QuizDataset.load(rows)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def controller(dataset, scheduler):
    return QuizController(dataset, scheduler, feedback_delay_ms=1000)
