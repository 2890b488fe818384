import sys
from typing import Optional

from rich.console import Console

from league_table.models.ranking import (
    BadLine,
    RankedEntry,
    RankingFailure,
    RankingResult,
)
from league_table.utils.misc_utils import points_unit

FAILURE_HEADER = (
    "Failed to determine rankings; there were problems with the following lines:"
)


def plain_console(file=None) -> Console:
    """A Console for plain report lines: no markup, emoji or highlighting."""
    return Console(
        file=file,
        markup=False,
        highlight=False,
        emoji=False,
    )


def format_ranked_entry(entry: RankedEntry) -> str:
    points = entry.team.points
    return f"{entry.rank}. {entry.team.name}, {points} {points_unit(points)}"


def format_bad_line(bad_line: BadLine) -> str:
    return f"{bad_line.line_number}:  {bad_line.line}"


def render_result(
    result: RankingResult,
    out: Optional[Console] = None,
    err: Optional[Console] = None,
) -> None:
    """Writes standings to `out`, or the failure report to `err`."""
    if out is None:
        out = plain_console(sys.stdout)
    if err is None:
        err = plain_console(sys.stderr)

    if isinstance(result, RankingFailure):
        _write_line(err, FAILURE_HEADER)
        for bad_line in result.bad_lines:
            _write_line(err, format_bad_line(bad_line))
        return

    for entry in result.rankings:
        _write_line(out, format_ranked_entry(entry))


def _write_line(console: Console, text: str) -> None:
    # Written verbatim: rich rendering expands tabs and drops control characters
    console.file.write(text + "\n")
