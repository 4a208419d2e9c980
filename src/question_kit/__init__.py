# Answers
from .answers import AnswerSheet, DocumentPayload, group_document

# Grouping
from .grouping import (
    RA_FALLBACK_LABEL,
    GroupedQuestion,
    RASection,
    extract_ra_code,
    group_by_ra,
    ra_group_key,
    ra_sections,
)

# Intake
from .intake import (
    EmptyTextError,
    IntakeConfig,
    IntakeError,
    ParseRequest,
    ParseResult,
    TextIntake,
    TextTooShortError,
    load_intake_config,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Segmentation
from .segmentation import (
    HEADER_PATTERNS,
    HeaderPattern,
    Question,
    is_header,
    match_header,
    segment_questions,
    split_lines,
    split_questions,
)

__all__ = [
    # Answers
    "AnswerSheet",
    "DocumentPayload",
    "group_document",
    # Grouping
    "RA_FALLBACK_LABEL",
    "GroupedQuestion",
    "RASection",
    "extract_ra_code",
    "group_by_ra",
    "ra_group_key",
    "ra_sections",
    # Intake
    "EmptyTextError",
    "IntakeConfig",
    "IntakeError",
    "ParseRequest",
    "ParseResult",
    "TextIntake",
    "TextTooShortError",
    "load_intake_config",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Segmentation
    "HEADER_PATTERNS",
    "HeaderPattern",
    "Question",
    "is_header",
    "match_header",
    "segment_questions",
    "split_lines",
    "split_questions",
]
