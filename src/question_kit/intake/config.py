# src/question_kit/intake/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class IntakeConfig:
    """Configuration for text intake.

    Immutable. Explicit. No magic defaults from environment.
    """

    min_text_chars: int = 20
    max_text_chars: int = 500_000  # roughly 100-200 pages
    fallback_to_whole_text: bool = True

    def __post_init__(self) -> None:
        if self.min_text_chars < 0:
            raise ValueError("min_text_chars must be >= 0")
        if self.max_text_chars <= 0:
            raise ValueError("max_text_chars must be > 0")
        if self.min_text_chars > self.max_text_chars:
            raise ValueError("min_text_chars must be <= max_text_chars")
