from typing import Dict, Iterable, List, Optional

from loguru import logger

from league_table.models.game import GameResult
from league_table.models.ranking import (
    BadLine,
    RankedEntry,
    RankingFailure,
    RankingResult,
    RankingSuccess,
)
from league_table.models.scoring import ScoringPolicy, STANDARD_SCORING
from league_table.models.team import Team
from league_table.ranking.line_parser import LineParser


class RankingEngine:
    """Builds league standings from game result lines.

    The engine holds no per-call state, so one instance can be reused for any
    number of calculations.
    """

    def __init__(
        self,
        scoring: ScoringPolicy = STANDARD_SCORING,
        parser: Optional[LineParser] = None,
    ):
        self.parser = parser or LineParser(scoring)

    def calculate_rankings(self, lines: Iterable[str]) -> RankingResult:
        """
        Computes the total points and the ranking of every team.

        Teams are sorted by points (descending) and then by name (ascending,
        case sensitive). Teams on equal points share a rank, and the next rank
        is the 1-based position of the following team (1, 1, 3, ...).

        Args:
            lines: Game result lines, consumed once from front to back.

        Returns:
            A RankingFailure listing every bad line when any line failed to
            parse, otherwise a RankingSuccess with the ranked teams.
        """
        teams: Dict[str, Team] = {}
        bad_lines: List[BadLine] = []

        line_number = 0
        for line_number, line in enumerate(lines, start=1):
            parsed = self.parser.parse(line_number, line)
            if isinstance(parsed, BadLine):
                bad_lines.append(parsed)
                continue
            for result in parsed.results():
                self._apply_result(teams, result)

        logger.info(
            f"Processed {line_number} line(s): {len(teams)} team(s), {len(bad_lines)} bad line(s)."
        )

        if bad_lines:  # no point ranking anything if we have bad lines
            logger.info(f"Rankings not computed; {len(bad_lines)} bad line(s) found.")
            return RankingFailure(bad_lines=bad_lines)

        return RankingSuccess(rankings=self.rank_teams(teams.values()))

    @staticmethod
    def rank_teams(teams: Iterable[Team]) -> List[RankedEntry]:
        """Sorts teams and assigns competition-style ranks in a single pass."""
        rankings: List[RankedEntry] = []
        rank = 0
        last_points: Optional[int] = None
        ordered = sorted(teams, key=lambda team: (-team.points, team.name))
        for position, team in enumerate(ordered, start=1):
            if team.points != last_points:
                rank = position
                last_points = team.points
            rankings.append(RankedEntry(rank=rank, team=team))
        return rankings

    @staticmethod
    def _apply_result(teams: Dict[str, Team], result: GameResult) -> None:
        team = teams.get(result.team_name)
        if team is None:
            teams[result.team_name] = Team(name=result.team_name, points=result.points)
        else:
            team.add_points(result.points)
