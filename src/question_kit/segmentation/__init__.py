# src/question_kit/segmentation/__init__.py

"""Question segmentation for extracted task statements.

Example:
    >>> from question_kit.segmentation import segment_questions
    >>>
    >>> text = "Intro\\nPregunta 1: what is 2+2?\\nPregunta 2: what is 3+3?"
    >>> segment_questions(text)
    ['Pregunta 1: what is 2+2?', 'Pregunta 2: what is 3+3?']
"""

from .models import Question
from .patterns import HEADER_PATTERNS, HeaderPattern, is_header, match_header
from .segmenter import segment_questions, split_lines, split_questions

__all__ = [
    # Classifier
    "HEADER_PATTERNS",
    "HeaderPattern",
    "is_header",
    "match_header",
    # Segmenter
    "Question",
    "segment_questions",
    "split_lines",
    "split_questions",
]
