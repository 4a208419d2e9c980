# src/question_kit/segmentation/models.py

from dataclasses import dataclass


@dataclass(frozen=True)
class Question:
    """A closed question produced by the segmenter.

    `header` is the line that opened it and `pattern` the name of the
    recognizer that matched that line.
    """

    text: str
    header: str
    pattern: str
    lines: tuple[str, ...]
