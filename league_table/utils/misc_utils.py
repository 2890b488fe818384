# league_table/utils/misc_utils.py
import re
from typing import Optional

# Optional sign followed by ASCII digits only
INTEGER_LITERAL_RE = re.compile(r"[+-]?[0-9]+")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def parse_int32(token: str) -> Optional[int]:
    """Parses a base-10 integer literal, or returns None if invalid or out of 32-bit range."""
    if not INTEGER_LITERAL_RE.fullmatch(token):
        return None
    value = int(token)
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


def points_unit(points: int) -> str:
    return "pt" if points == 1 else "pts"
