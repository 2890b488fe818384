import re
from typing import List, Optional, Tuple, Union

from loguru import logger

from league_table.models.enums import BadLineReason
from league_table.models.game import GameOutcome, GameResult
from league_table.models.ranking import BadLine
from league_table.models.scoring import ScoringPolicy, STANDARD_SCORING
from league_table.utils.misc_utils import parse_int32

SEGMENT_SEPARATOR = ","
# Leading whitespace survives as an empty first token, i.e. an empty name
TOKEN_SEPARATOR_RE = re.compile(r"\s+")

ParsedLine = Union[GameOutcome, BadLine]


class LineParser:
    """Turns a single "<team> <score>, <team> <score>" line into points per team."""

    def __init__(self, scoring: ScoringPolicy = STANDARD_SCORING):
        self.scoring = scoring

    def parse(self, line_number: int, line: str) -> ParsedLine:
        """Parses one game result line.

        Args:
            line_number: 1-based position of the line in its source.
            line: The raw line, without its line terminator.

        Returns:
            A GameOutcome with the points each team earns for the game, or a
            BadLine carrying the line number and the untouched raw line.
        """
        segments = line.split(SEGMENT_SEPARATOR)
        if len(segments) != 2:
            return self._bad_line(line_number, line, BadLineReason.MALFORMED_LINE)

        first = self._split_segment(segments[0])
        second = self._split_segment(segments[1])
        if first is None or second is None:
            return self._bad_line(line_number, line, BadLineReason.MALFORMED_LINE)

        first_name, first_score = first
        second_name, second_score = second
        if not first_name or not second_name:
            return self._bad_line(line_number, line, BadLineReason.EMPTY_TEAM_NAME)
        if first_name == second_name:
            return self._bad_line(line_number, line, BadLineReason.SELF_PLAY)

        first_points, second_points = self.scoring.points_for(first_score, second_score)
        return GameOutcome(
            first=GameResult(team_name=first_name, points=first_points),
            second=GameResult(team_name=second_name, points=second_points),
        )

    @staticmethod
    def _split_segment(segment: str) -> Optional[Tuple[str, int]]:
        """Splits "<name tokens> <score>" into (name, score); None if no score can be separated."""
        tokens: List[str] = TOKEN_SEPARATOR_RE.split(segment.rstrip())
        if len(tokens) < 2:
            return None
        score = parse_int32(tokens[-1])
        if score is None:
            return None
        return " ".join(tokens[:-1]).strip(), score

    @staticmethod
    def _bad_line(line_number: int, line: str, reason: BadLineReason) -> BadLine:
        logger.debug(f"Rejected line {line_number} ({reason.value}): {line!r}")
        return BadLine(line_number=line_number, line=line, reason=reason)
