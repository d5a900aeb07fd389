"""Tests for score calculation."""

import pytest

from quiz_canvas.core.services.quiz_dataset import QuizDataset
from quiz_canvas.core.services.scoreboard import count_correct, summarize


def _answer(dataset, texts):
    for question, text in zip(dataset, texts):
        question.record_answer(text)
    return dataset.questions


class TestSummarize:
    def test_unanswered_questions_count_as_wrong(self, dataset):
        result = summarize(dataset.questions)
        assert result.correct_count == 0
        assert result.score == 0
        assert result.total == 4

    def test_percentage_and_pass_flag(self, dataset):
        questions = _answer(dataset, ["4", "Paris", "Jupiter", "func"])
        result = summarize(questions)
        assert count_correct(questions) == 3
        assert result.score == 75
        assert not result.passed

    def test_threshold_is_inclusive(self, dataset):
        questions = _answer(dataset, ["4", "Paris", "Jupiter", "func"])
        assert summarize(questions, pass_threshold=75).passed

    def test_default_threshold_is_eighty(self, rows):
        dataset = QuizDataset.load(rows + [rows[0]])
        questions = _answer(dataset, ["4", "Paris", "Jupiter", "def", "3"])
        assert summarize(questions).score == 80
        assert summarize(questions).passed

    def test_empty_input_rejected(self):
        with pytest.raises(ValueError):
            summarize([])
