"""Tests for parsing single game result lines."""

from __future__ import annotations

import pytest

from league_table.models.enums import BadLineReason
from league_table.models.game import GameOutcome, GameResult
from league_table.models.ranking import BadLine
from league_table.models.scoring import ScoringPolicy
from league_table.ranking.line_parser import LineParser

PARSER = LineParser()


@pytest.mark.parametrize(
    "line",
    [
        "Team1, Team2 5",
        "Team1 5, Team2",
        "Team1, Team2",
        "5, Team2 5",
        "5, 5",
        "",
        "   ",
        "Team1 5 Team2 5",
        "Team1 5, Team2 5, Team3 5",
        "Team1 5, Team2 5,",
        "Team1 five, Team2 5",
        "Team1 5.0, Team2 5",
        "Team1 1_000, Team2 5",
        "Team1 2147483648, Team2 5",
        "Team1 5, Team2 -2147483649",
    ],
)
def test_malformed_lines_are_rejected_verbatim(line: str) -> None:
    result = PARSER.parse(1, line)

    assert isinstance(result, BadLine)
    assert result.line_number == 1
    assert result.line == line
    assert result.reason == BadLineReason.MALFORMED_LINE


def test_empty_team_name_is_rejected() -> None:
    line = "Team1 5, 5"
    result = PARSER.parse(4, line)

    assert isinstance(result, BadLine)
    assert result.line_number == 4
    assert result.line == line
    assert result.reason == BadLineReason.EMPTY_TEAM_NAME


def test_team_cannot_play_itself() -> None:
    result = PARSER.parse(2, "Team1 5, Team1 5")

    assert isinstance(result, BadLine)
    assert result.line_number == 2
    assert result.reason == BadLineReason.SELF_PLAY


def test_self_play_compares_names_after_trimming() -> None:
    result = PARSER.parse(1, "  Team1   3 ,Team1 1")

    assert isinstance(result, BadLine)
    assert result.reason == BadLineReason.SELF_PLAY


def test_names_differing_only_by_case_are_distinct_teams() -> None:
    result = PARSER.parse(1, "ants 1, Ants 1")

    assert isinstance(result, GameOutcome)
    assert result.first.team_name == "ants"
    assert result.second.team_name == "Ants"


def test_win_loss_and_draw_use_default_points() -> None:
    assert PARSER.parse(1, "Lions 4, Grouches 0") == GameOutcome(
        first=GameResult(team_name="Lions", points=3),
        second=GameResult(team_name="Grouches", points=0),
    )
    assert PARSER.parse(1, "Tarantulas 1, Snakes 3") == GameOutcome(
        first=GameResult(team_name="Tarantulas", points=0),
        second=GameResult(team_name="Snakes", points=3),
    )
    assert PARSER.parse(1, "Lions 3, Snakes 3") == GameOutcome(
        first=GameResult(team_name="Lions", points=1),
        second=GameResult(team_name="Snakes", points=1),
    )


def test_multi_word_names_are_joined_with_single_spaces() -> None:
    result = PARSER.parse(1, "  FC   Awesome\t1 ,  Real   Team 2  ")

    assert isinstance(result, GameOutcome)
    assert result.first.team_name == "FC Awesome"
    assert result.second.team_name == "Real Team"


def test_signed_scores_are_accepted() -> None:
    result = PARSER.parse(1, "Lions +2, Snakes -1")

    assert isinstance(result, GameOutcome)
    assert result.first.points == 3
    assert result.second.points == 0


def test_custom_scoring_policy() -> None:
    parser = LineParser(ScoringPolicy(win_points=2, draw_points=1, loss_points=0))

    win = parser.parse(1, "A 2, B 1")
    draw = parser.parse(2, "A 0, B 0")

    assert isinstance(win, GameOutcome)
    assert win.results() == (
        GameResult(team_name="A", points=2),
        GameResult(team_name="B", points=0),
    )
    assert isinstance(draw, GameOutcome)
    assert [r.points for r in draw.results()] == [1, 1]


def test_parse_is_deterministic() -> None:
    line = "Tarantulas 3, Snakes 1"
    assert PARSER.parse(5, line) == PARSER.parse(5, line)
    assert PARSER.parse(5, "Bad, Line") == PARSER.parse(5, "Bad, Line")
