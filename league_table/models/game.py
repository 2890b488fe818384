from typing import Tuple

from pydantic import BaseModel, ConfigDict


class GameResult(BaseModel):
    """Points awarded to one side of a single game."""

    model_config = ConfigDict(frozen=True)

    team_name: str
    points: int


class GameOutcome(BaseModel):
    """Both sides of a successfully parsed result line, in input order."""

    model_config = ConfigDict(frozen=True)

    first: GameResult
    second: GameResult

    def results(self) -> Tuple[GameResult, GameResult]:
        return (self.first, self.second)
