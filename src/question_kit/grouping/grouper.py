# src/question_kit/grouping/grouper.py

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from time import monotonic

from question_kit.observability import names
from question_kit.observability.base import MetricsHook, NoOpMetricsHook

from .ra_codes import ra_group_key

logger = logging.getLogger(__name__)

Answers = Mapping[int, str] | Mapping[str, str] | Sequence[str]


@dataclass(frozen=True)
class GroupedQuestion:
    question: str
    answer: str
    index: int


@dataclass(frozen=True)
class RASection:
    """One export section: an RA code (or the fallback label) and its entries."""

    code: str
    entries: tuple[GroupedQuestion, ...]


def _index_answers(answers: Answers | None) -> dict[int, str]:
    """Key answers by question index.

    Mapping keys may be strings ("0", "1", ...) as stored in JSON; keys that
    are not integers are skipped.
    """
    if answers is None:
        return {}
    if isinstance(answers, str):
        raise TypeError("answers must be a mapping or a sequence of strings, not str")
    if not isinstance(answers, Mapping):
        return dict(enumerate(answers))

    indexed: dict[int, str] = {}
    for key, value in answers.items():
        try:
            indexed[int(key)] = value
        except (TypeError, ValueError):
            logger.warning("Ignoring non-integer answer key: %r", key)
    return indexed


def group_by_ra(
    questions: Sequence[str],
    answers: Answers | None = None,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> dict[str, list[GroupedQuestion]]:
    """Group question/answer pairs by RA code.

    Answers are matched by position; a missing answer becomes "". Keys come
    out sorted by their string value, the fallback label included. Inside a
    group, entries keep their original relative order.

    Raises:
        TypeError: If `answers` is a bare string.
    """
    start = monotonic()

    indexed_answers = _index_answers(answers)
    groups: dict[str, list[GroupedQuestion]] = {}
    for index, question in enumerate(questions):
        key = ra_group_key(question)
        groups.setdefault(key, []).append(
            GroupedQuestion(
                question=question,
                answer=indexed_answers.get(index) or "",
                index=index,
            )
        )

    ordered = {key: groups[key] for key in sorted(groups)}

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.GROUPING_DURATION, elapsed_ms)
    metrics_hook.increment(names.GROUPING_GROUPS_CREATED, len(ordered))
    logger.debug(
        "Grouped %d question(s) into %d RA group(s): %s",
        len(questions),
        len(ordered),
        list(ordered),
    )
    return ordered


def ra_sections(
    questions: Sequence[str],
    answers: Answers | None = None,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[RASection]:
    groups = group_by_ra(questions, answers, metrics_hook=metrics_hook)
    return [
        RASection(code=code, entries=tuple(entries)) for code, entries in groups.items()
    ]
