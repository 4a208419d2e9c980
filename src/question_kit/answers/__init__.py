from .answer_sheet import AnswerSheet, AnswerStatus, DocumentPayload, group_document

__all__ = [
    "AnswerSheet",
    "AnswerStatus",
    "DocumentPayload",
    "group_document",
]
