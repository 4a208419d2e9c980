# src/question_kit/intake/service.py

import logging

from question_kit.observability import names
from question_kit.observability.base import MetricsHook, NoOpMetricsHook
from question_kit.segmentation.segmenter import segment_questions

from .config import IntakeConfig
from .errors import EmptyTextError, TextTooShortError
from .models import ParseRequest, ParseResult

logger = logging.getLogger(__name__)


class TextIntake:
    """Turns already-extracted task text into a ParseResult.

    Validation lives here, not in the segmenter: the segmenter is total and
    this is the boundary that may reject input.
    """

    def __init__(
        self,
        config: IntakeConfig = IntakeConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.metrics_hook = metrics_hook

    def parse(self, request: ParseRequest | str) -> ParseResult:
        if isinstance(request, str):
            request = ParseRequest(text=request)

        self.metrics_hook.increment(names.INTAKE_REQUESTS_TOTAL)
        text = request.text
        stripped = text.strip()

        if not stripped:
            self._reject("empty")
            raise EmptyTextError()

        if len(stripped) < self.config.min_text_chars:
            self._reject("too_short")
            raise TextTooShortError(len(stripped), self.config.min_text_chars)

        questions = segment_questions(text, metrics_hook=self.metrics_hook)
        fallback_used = False

        if not questions and self.config.fallback_to_whole_text:
            logger.info("No question headers detected, using the whole text")
            questions = [stripped]
            fallback_used = True
            self.metrics_hook.increment(names.INTAKE_FALLBACK_TOTAL)

        logger.info(
            "Intake accepted: chars=%d, questions=%d, fallback=%s",
            len(text),
            len(questions),
            fallback_used,
        )

        return ParseResult(
            text=text[: self.config.max_text_chars],
            questions=questions,
            fallback_used=fallback_used,
        )

    def _reject(self, reason: str) -> None:
        logger.warning("Intake rejected text: reason=%s", reason)
        self.metrics_hook.increment(
            names.INTAKE_REJECTED_TOTAL, labels={"reason": reason}
        )
