import logging
from collections.abc import Mapping, Sequence
from typing import Any, Literal

from pydantic import BaseModel

from question_kit.grouping.grouper import GroupedQuestion, group_by_ra
from question_kit.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)

AnswerStatus = Literal["pending", "review", "complete"]

# Answers longer than this count as complete rather than draft
COMPLETE_ANSWER_CHARS = 50


class AnswerSheet(BaseModel):
    """Answers keyed by question position."""

    answers: dict[int, str]

    class Config:
        extra = "forbid"

    @classmethod
    def blank(cls, questions: Sequence[str]) -> "AnswerSheet":
        return cls(answers={index: "" for index in range(len(questions))})

    def merge(self, raw: Mapping[Any, Any]) -> "AnswerSheet":
        """Return a copy with `raw` merged in.

        Keys may be strings ("0", "1", ...) as they come out of model JSON.
        Keys that are not indices of this sheet are skipped, and empty
        values never overwrite an existing answer.
        """
        merged = dict(self.answers)
        for key, value in raw.items():
            try:
                index = int(key)
            except (TypeError, ValueError):
                logger.warning("Ignoring non-integer answer key: %r", key)
                continue

            if index not in merged:
                logger.warning("Ignoring answer for unknown question index: %d", index)
                continue

            if value:
                merged[index] = str(value)

        return AnswerSheet(answers=merged)

    def pending_indices(self, min_chars: int = 20) -> list[int]:
        """Indices whose answer is still too short to count as written."""
        return sorted(
            index
            for index, answer in self.answers.items()
            if len(answer.strip()) < min_chars
        )

    def status(self, index: int) -> AnswerStatus:
        """Editor status of one answer: empty, short draft, or written."""
        try:
            answer = self.answers[index]
        except KeyError:
            logger.error("Answer not found: index=%d", index)
            raise KeyError(f"No answer for question index {index}")

        if not answer:
            return "pending"
        if len(answer) > COMPLETE_ANSWER_CHARS:
            return "complete"
        return "review"


class DocumentPayload(BaseModel):
    """Stored questions and answers as they arrive from the web layer."""

    questions: list[str]
    answers: dict[int, str] = {}

    class Config:
        extra = "forbid"


def group_document(
    payload: DocumentPayload,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> dict[str, list[GroupedQuestion]]:
    return group_by_ra(payload.questions, payload.answers, metrics_hook=metrics_hook)
