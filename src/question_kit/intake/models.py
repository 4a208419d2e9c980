# src/question_kit/intake/models.py

from pydantic import BaseModel


class ParseRequest(BaseModel):
    text: str

    class Config:
        extra = "forbid"


class ParseResult(BaseModel):
    """Outcome of one intake call.

    `text` is the source text cut to the configured budget; `questions` were
    segmented from the full text. `fallback_used` is set when no header was
    found and the whole text became a single question.
    """

    text: str
    questions: list[str]
    fallback_used: bool = False
