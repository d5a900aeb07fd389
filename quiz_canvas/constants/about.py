"""Static metadata describing QuizCanvas."""

APP_NAME = "QuizCanvas"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizCanvas is a single-screen multiple-choice quiz drawn on a Qt canvas. "
    "Questions are read from a CSV file, answered with the mouse, and scored at the end."
)

CSV_FORMAT_HELP = (
    "The quiz file is a CSV with a header row:\n\n"
    "question,optionA,optionB,optionC,optionD,answer\n"
    "What does len('abc') return?,2,3,4,Error,3\n\n"
    "The answer column must repeat the text of the correct option."
)
