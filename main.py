import sys
from typing import List, Optional

# --- Settings/Logging ---
from league_table.logging.setup import setup_logging
from league_table.config.settings import settings

from loguru import logger

# --- End Settings/Logging ---

from league_table.cli.input_file import InputFileError, read_lines, resolve_input_file
from league_table.models.ranking import RankingFailure
from league_table.models.scoring import ScoringPolicy
from league_table.ranking.engine import RankingEngine
from league_table.rendering.formatter import plain_console, render_result

EXIT_OK = 0
EXIT_BAD_LINES = 1
EXIT_INPUT_ERROR = 2


def main(argv: Optional[List[str]] = None) -> int:
    """Prints the league table for the results file named on the command line."""
    setup_logging()
    args = sys.argv[1:] if argv is None else argv

    try:
        input_path = resolve_input_file(args)
        scoring = ScoringPolicy.from_settings(settings)
        logger.info(f"Ranking teams from {input_path} with {scoring}")

        engine = RankingEngine(scoring)
        result = engine.calculate_rankings(read_lines(input_path))
    except InputFileError as e:
        plain_console(sys.stderr).out(str(e))
        return EXIT_INPUT_ERROR

    render_result(result)
    if isinstance(result, RankingFailure):
        return EXIT_BAD_LINES
    logger.success(f"Ranked {len(result.rankings)} teams.")
    return EXIT_OK


def run() -> None:
    """Console entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
