"""Quiz-related constants shared across UI and core layers."""

FEEDBACK_DELAY_MS: int = 1000
PASS_SCORE_THRESHOLD: float = 80.0

DEFAULT_DATASET_PATH: str = "question.csv"
QUESTION_COLUMN: str = "question"
ANSWER_COLUMN: str = "answer"
OPTION_COLUMNS: tuple[str, ...] = ("optionA", "optionB", "optionC", "optionD")
