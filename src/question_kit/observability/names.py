# src/question_kit/observability/names.py

"""Standard metric names for question-kit observability.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Segmentation Metrics
# ============================================================================

# Duration
SEGMENTATION_DURATION = "segmentation_duration"

# Counters
SEGMENTATION_QUESTIONS_CREATED = "segmentation_questions_created"
# Lines seen before the first header line; they never reach a question
SEGMENTATION_LINES_DROPPED = "segmentation_lines_dropped"


# ============================================================================
# RA Grouping Metrics
# ============================================================================

# Duration
GROUPING_DURATION = "grouping_duration"

# Counters
GROUPING_GROUPS_CREATED = "grouping_groups_created"


# ============================================================================
# Intake Metrics
# ============================================================================

# Counters
INTAKE_REQUESTS_TOTAL = "intake_requests_total"
INTAKE_REJECTED_TOTAL = "intake_rejected_total"
INTAKE_FALLBACK_TOTAL = "intake_fallback_total"
