# src/question_kit/grouping/ra_codes.py

import re

RA_FALLBACK_LABEL = "OTROS / RA NO ESPECIFICADO"

# Unanchored: the code may sit anywhere in the question text.
_STRICT_RA = re.compile(r"\(?(RA[0-9]+_[a-z])\)?", re.IGNORECASE)
_LOOSE_RA = re.compile(r"R\.?A\.?\s*([0-9]+)([._])([A-Za-z0-9_]+)", re.IGNORECASE)


def extract_ra_code(question: str) -> str | None:
    """Derive the learning-outcome code of a question.

    Strict codes are uppercased and lose their parentheses:
    "(ra04_a)" -> "RA04_A". Loose codes lose the dots and spaces of the
    "R.A." prefix: "R.A. 4.a" -> "RA4.A". Digits are not zero padded, so a
    loose code never collapses onto the matching strict one.
    """
    strict = _STRICT_RA.search(question)
    if strict:
        return strict.group(1).upper()

    loose = _LOOSE_RA.search(question)
    if loose:
        digits, separator, token = loose.groups()
        return f"RA{digits}{separator}{token}".upper()

    return None


def ra_group_key(question: str) -> str:
    return extract_ra_code(question) or RA_FALLBACK_LABEL
