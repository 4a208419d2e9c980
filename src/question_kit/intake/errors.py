# src/question_kit/intake/errors.py


class IntakeError(ValueError):
    """Base class for text rejected at the intake boundary."""


class EmptyTextError(IntakeError):
    def __init__(self) -> None:
        super().__init__("No text could be extracted (empty or scanned file)")


class TextTooShortError(IntakeError):
    def __init__(self, length: int, min_chars: int) -> None:
        self.length = length
        self.min_chars = min_chars
        super().__init__(
            f"Text is too short: {length} characters (minimum {min_chars})"
        )
