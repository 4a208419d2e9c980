from .grouper import GroupedQuestion, RASection, group_by_ra, ra_sections
from .ra_codes import RA_FALLBACK_LABEL, extract_ra_code, ra_group_key

__all__ = [
    "RA_FALLBACK_LABEL",
    "GroupedQuestion",
    "RASection",
    "extract_ra_code",
    "group_by_ra",
    "ra_group_key",
    "ra_sections",
]
