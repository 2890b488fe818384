from enum import Enum


class BadLineReason(str, Enum):
    MALFORMED_LINE = "MALFORMED_LINE"  # Segment count, missing or non-integer score
    EMPTY_TEAM_NAME = "EMPTY_TEAM_NAME"
    SELF_PLAY = "SELF_PLAY"  # Both sides resolve to the same team
