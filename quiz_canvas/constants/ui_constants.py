"""Qt UI constants used by the quiz canvas."""

WINDOW_TITLE: str = "QuizCanvas"
CANVAS_WIDTH: int = 800
CANVAS_HEIGHT: int = 600
FRAME_INTERVAL_MS: int = 16

CONTENT_MARGIN_X: int = 50
PROGRESS_Y: int = 50
PROMPT_Y: int = 100
OPTIONS_TOP_Y: int = 150
OPTION_HEIGHT: int = 60
OPTION_GAP: int = 10
OPTION_CORNER_RADIUS: int = 8

RESTART_BUTTON_WIDTH: int = 180
RESTART_BUTTON_HEIGHT: int = 50
RESTART_BUTTON_BOTTOM_OFFSET: int = 50

CURSOR_TRAIL_LENGTH: int = 20
SPARKLE_COUNT: int = 5
BUBBLE_COUNT: int = 10

PROGRESS_TEMPLATE: str = "Question {current} / {total}"
CORRECT_FEEDBACK_TEXT: str = "✅ Correct!"
INCORRECT_FEEDBACK_TEXT: str = "❌ Wrong! The correct answer is highlighted."
PASSED_HEADLINE_TEMPLATE: str = "\U0001f4af Perfect! Your score: {score:.0f}"
FAILED_HEADLINE_TEMPLATE: str = "\U0001f44d Keep going! Your score: {score:.0f}"
PASSED_MESSAGE: str = "Great work, keep it up!"
FAILED_MESSAGE: str = "Don't give up, a few more rounds and you'll get there!"
RESTART_BUTTON_TEXT: str = "Restart Quiz"

LOAD_FAILED_TITLE: str = "Quiz could not be loaded"
