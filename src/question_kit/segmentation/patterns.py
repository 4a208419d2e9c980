# src/question_kit/segmentation/patterns.py

import re
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class HeaderPattern:
    """A recognizer for lines that open a new question.

    Immutable. Start-anchored: a match only counts at the beginning of the
    line, leading whitespace and a byte order mark allowed. Digits and word
    characters are ASCII only, so "PARTE Única" is body text.
    """

    name: str
    regex: re.Pattern[str]
    example: str

    def matches(self, line: str) -> bool:
        return self.regex.match(line) is not None


# Ordered: specific RA-style codes first, generic enumerators last.
HEADER_PATTERNS: tuple[HeaderPattern, ...] = (
    HeaderPattern(
        name="ra_code",
        regex=re.compile(r"^[\s\ufeff]*\(?RA[0-9]+_[a-z]\)?", re.IGNORECASE),
        example="(RA04_a)",
    ),
    HeaderPattern(
        name="ra_loose",
        regex=re.compile(r"^[\s\ufeff]*\(?RA\s*[0-9]+", re.IGNORECASE),
        example="(RA 04",
    ),
    HeaderPattern(
        name="ra_dotted",
        regex=re.compile(r"^[\s\ufeff]*R\.?A\.?\s*[0-9]+", re.IGNORECASE),
        example="R.A. 4",
    ),
    HeaderPattern(
        name="activity",
        regex=re.compile(r"^[\s\ufeff]*Actividad\s+[0-9]+", re.IGNORECASE),
        example="Actividad 1",
    ),
    HeaderPattern(
        name="question",
        regex=re.compile(r"^[\s\ufeff]*Pregunta\.?\s*[0-9]+", re.IGNORECASE),
        example="Pregunta 1",
    ),
    HeaderPattern(
        name="part",
        regex=re.compile(r"^[\s\ufeff]*PARTE\s+[A-Za-z0-9_]+", re.IGNORECASE),
        example="PARTE A",
    ),
    HeaderPattern(
        # Whitespace after the separator is mandatory so "1.5" stays body text
        name="enumerator",
        regex=re.compile(r"^[\s\ufeff]*[0-9]+[.)]\s+"),
        example="1. ",
    ),
)


def match_header(
    line: str,
    patterns: Sequence[HeaderPattern] = HEADER_PATTERNS,
) -> HeaderPattern | None:
    """Return the first pattern that opens a question on this line, or None."""
    for pattern in patterns:
        if pattern.matches(line):
            return pattern
    return None


def is_header(
    line: str,
    patterns: Sequence[HeaderPattern] = HEADER_PATTERNS,
) -> bool:
    return match_header(line, patterns) is not None
