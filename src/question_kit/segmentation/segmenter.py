# src/question_kit/segmentation/segmenter.py

import logging
import re
from collections.abc import Sequence
from time import monotonic

from question_kit.observability import names
from question_kit.observability.base import MetricsHook, NoOpMetricsHook

from .models import Question
from .patterns import HEADER_PATTERNS, HeaderPattern, match_header

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")
# str.strip() keeps U+FEFF; a BOM left on the first line hides its header
_EDGE_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def split_lines(text: str) -> list[str]:
    """Split on \\n or \\r\\n, trim each line and drop the empty ones.

    Trimming also removes byte order marks.
    """
    stripped = (_EDGE_SPACE.sub("", line) for line in _LINE_BREAK.split(text))
    return [line for line in stripped if line]


def split_questions(
    text: str,
    *,
    patterns: Sequence[HeaderPattern] = HEADER_PATTERNS,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Question]:
    """Split raw extracted text into questions, in document order.

    Single pass with one open question at a time. A header line closes the
    open question and opens a new one; any other line is appended to the
    open question. Lines before the first header are dropped.

    Never raises. Text without any header yields an empty list; deciding
    what to do then is the caller's business.
    """
    start = monotonic()

    questions: list[Question] = []
    current_lines: list[str] = []
    current_pattern: HeaderPattern | None = None
    dropped = 0

    def close() -> None:
        if current_pattern is None:
            return
        questions.append(
            Question(
                text="\n".join(current_lines).strip(),
                header=current_lines[0],
                pattern=current_pattern.name,
                lines=tuple(current_lines),
            )
        )

    for line in split_lines(text):
        pattern = match_header(line, patterns)

        if pattern is not None:
            close()
            current_lines = [line]
            current_pattern = pattern
            continue

        if current_pattern is not None:
            current_lines.append(line)
        else:
            dropped += 1

    close()

    if dropped:
        logger.debug("Dropped %d line(s) before the first header", dropped)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.SEGMENTATION_DURATION, elapsed_ms)
    metrics_hook.increment(names.SEGMENTATION_QUESTIONS_CREATED, len(questions))
    metrics_hook.increment(names.SEGMENTATION_LINES_DROPPED, dropped)

    logger.debug(
        "Segmented %d question(s) in %.1fms", len(questions), elapsed_ms
    )
    return questions


def segment_questions(
    text: str,
    *,
    patterns: Sequence[HeaderPattern] = HEADER_PATTERNS,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[str]:
    """Return the question texts of `split_questions`."""
    return [
        q.text
        for q in split_questions(text, patterns=patterns, metrics_hook=metrics_hook)
    ]
