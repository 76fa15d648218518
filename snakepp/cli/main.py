from __future__ import annotations

import sys
from pathlib import Path

from snakepp.cli.errors.error_handler import cli_snakepp_error_handler
from snakepp.cli.goals import perform_desired_toolchain_goal
from snakepp.cli.parser.builder import build_cli_parser
from snakepp.cli.parser.parser import parse_cli_arguments

from .output import cli_message


def cli_entry_point(prog: str | None = None) -> None:
    """CLI main entry."""
    prog = prog or _resolve_executable_program()

    parser = build_cli_parser(prog)
    args = parse_cli_arguments(parser.parse_args())
    wrapper = cli_snakepp_error_handler(
        debug_user_friendly_errors=args.cli_debug_user_friendly_errors,
    )

    with wrapper:
        # Wrap goal into error handler as in unwraps errors into user-friendly ones (except internal ones as bugs)
        perform_desired_toolchain_goal(args)

    # This is unreachable but error wrapper must fail
    cli_message("ERROR", "Bug in an CLI: toolchain must perform at least one goal!")
    sys.exit(1)


def _resolve_executable_program() -> str:
    """Program name for usage messages, as it was invoked by user."""
    executable = Path(sys.argv[0]).name
    if executable != "__main__.py":
        return executable

    cli_message(
        "WARNING",
        "Running as `python -m snakepp`, consider installing package (e.g `pip install .`) to get `snakepp` executable!",
    )
    return "python -m snakepp"


if __name__ == "__main__":
    cli_entry_point(prog=None)
