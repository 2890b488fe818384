# league_table/models/team.py
from pydantic import BaseModel, Field


class Team(BaseModel):
    """A team and its cumulative points within one ranking computation."""

    name: str = Field(..., min_length=1)
    points: int = Field(0, ge=0)

    def add_points(self, additional_points: int) -> "Team":
        self.points += additional_points
        return self
