"""CLI entry point."""

import os
import sys
from typing import Optional

from common.exceptions import IOFailure, SplitterError, UserCancelled
from common.logging_config import setup_logging
from cli.commands import handle_split
from cli.constants import HELP_TEXT, RED, RESET, USAGE, YELLOW
from cli.models import HelpCommand
from cli.parser import ParseError, parse_command
from cli.utils import format_summary


def _error(message: str) -> None:
    color = sys.stderr.isatty()
    label = f"{RED}Error:{RESET}" if color else "Error:"
    print(f"{label} {message}", file=sys.stderr)


def main(argv: Optional[list[str]] = None) -> int:
    """
    Entry point for CLI.

    Returns:
        Exit code: 0 on success or cancellation, 1 on failure
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        cmd = parse_command(argv)
    except ParseError as e:
        _error(str(e))
        print(USAGE, file=sys.stderr)
        return 1

    if isinstance(cmd, HelpCommand):
        print(HELP_TEXT)
        return 0

    log_level = 'DEBUG' if cmd.debug else os.getenv('LOG_LEVEL', 'WARNING')
    logger = setup_logging('cli', log_level=log_level)
    setup_logging('splitter', log_level=log_level)

    if cmd.debug:
        logger.info("Debug logging enabled")

    try:
        summary = handle_split(cmd)
    except UserCancelled as e:
        logger.info(f"Split cancelled: {e}")
        message = f"Cancelled: {e}"
        print(f"{YELLOW}{message}{RESET}" if sys.stdout.isatty() else message)
        return 0
    except IOFailure as e:
        logger.debug(f"Split failed: {e}", exc_info=True)
        _error(f"{e} ({e.chunks_written} chunk(s) were written before the failure)")
        return 1
    except (SplitterError, ParseError) as e:
        logger.debug(f"Split rejected: {e}")
        _error(str(e))
        return 1

    if cmd.json_output:
        print(summary.model_dump_json(indent=2))
    else:
        print(format_summary(summary, color=sys.stdout.isatty()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
