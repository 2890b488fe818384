import os
from pathlib import Path
from typing import Iterator, Sequence

from loguru import logger


class LeagueTableError(Exception):
    """Base exception for league table errors."""

    pass


class InputFileError(LeagueTableError):
    """Exception raised when the input file cannot be resolved or read."""

    pass


def resolve_input_file(args: Sequence[str]) -> Path:
    """Resolves the command-line arguments to the input file.

    Args:
        args: Arguments passed to the program, excluding the program name.

    Returns:
        Path to the input file, which exists, is a regular file and is readable.

    Raises:
        InputFileError: When no argument or more than one argument was given,
            or the path is missing, is not a file, or cannot be read.
    """
    if len(args) == 0:
        raise InputFileError("Please supply the path to the input file.")
    elif len(args) > 1:
        raise InputFileError("Please supply ONLY the path to the input file.")

    path = Path(args[0])
    absolute = path.absolute()
    if not path.exists():
        raise InputFileError(f"No file exists at given path: {absolute}")
    if not path.is_file():
        raise InputFileError(
            f"Given path does not resolve to a file: {absolute}\nPossibly a directory?"
        )
    if not os.access(path, os.R_OK):
        raise InputFileError(
            f"We cannot read the file supplied: {absolute}\n"
            "Please check file permissions and/or application privileges."
        )
    logger.debug(f"Resolved input file: {absolute}")
    return path


def read_lines(path: Path) -> Iterator[str]:
    """Lazily yields the lines of `path` without their line terminators."""
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            for line in f:
                yield line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(f"Failed to read input file {path}: {e}") from e
