from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import BadLineReason
from .team import Team


class BadLine(BaseModel):
    """A result line that failed validation, kept exactly as it was read."""

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(..., ge=1)  # 1-based position in the input
    line: str  # Original, untrimmed line text
    # Only used internally; never part of the rendered report
    reason: BadLineReason = Field(BadLineReason.MALFORMED_LINE, repr=False)


class RankedEntry(BaseModel):
    """A team's place in the standings."""

    rank: int = Field(..., ge=1)
    team: Team


class RankingSuccess(BaseModel):
    """Every line parsed; standings sorted by points desc, then name asc."""

    rankings: List[RankedEntry] = []

    @property
    def is_success(self) -> bool:
        return True


class RankingFailure(BaseModel):
    """At least one line failed; holds every bad line in input order."""

    bad_lines: List[BadLine]

    @property
    def is_success(self) -> bool:
        return False


RankingResult = Union[RankingSuccess, RankingFailure]
