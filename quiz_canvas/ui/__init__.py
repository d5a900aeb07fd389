"""Qt canvas, input mapping and timer glue for the quiz.

Submodules are imported directly; ``canvas_layout`` and
``question_renderer`` do not depend on Qt.
"""
