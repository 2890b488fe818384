from typing import TYPE_CHECKING, Tuple

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from league_table.config.settings import AppSettings

DEFAULT_WIN_POINTS = 3
DEFAULT_DRAW_POINTS = 1
DEFAULT_LOSS_POINTS = 0


class ScoringPolicy(BaseModel):
    """Defines how a game's scores are converted into league points."""

    model_config = ConfigDict(frozen=True)

    win_points: int = Field(DEFAULT_WIN_POINTS, ge=0)
    draw_points: int = Field(DEFAULT_DRAW_POINTS, ge=0)
    loss_points: int = Field(DEFAULT_LOSS_POINTS, ge=0)

    @classmethod
    def from_settings(cls, app_settings: "AppSettings") -> "ScoringPolicy":
        """Builds a policy from an AppSettings instance."""
        return cls(
            win_points=app_settings.win_points,
            draw_points=app_settings.draw_points,
            loss_points=app_settings.loss_points,
        )

    def points_for(self, score: int, opponent_score: int) -> Tuple[int, int]:
        """
        Determine league points based on game scores.

        Args:
            score: Score of the first team
            opponent_score: Score of the second team

        Returns:
            Tuple of (first_team_points, second_team_points)
        """
        if score > opponent_score:
            return (self.win_points, self.loss_points)
        elif score < opponent_score:
            return (self.loss_points, self.win_points)
        else:
            return (self.draw_points, self.draw_points)


STANDARD_SCORING = ScoringPolicy()
