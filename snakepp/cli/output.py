"""Messages emitted by CLI (errors, warnings, info logs), stdout is left for preprocessor output."""

from __future__ import annotations

import sys
from typing import Literal, NoReturn, TypeAlias

MessageLevel: TypeAlias = Literal["INFO", "WARNING", "ERROR"]

CLI_MESSAGE_PREFIX = "[snakepp]"


def cli_message(
    level: MessageLevel,
    text: str,
    *,
    verbose: bool = True,
) -> None:
    """Emit an message into stderr, `INFO` messages are emitted only when verbose."""
    if level == "INFO" and not verbose:
        return
    print(f"{CLI_MESSAGE_PREFIX} [{level}] {text}", file=sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit an error and exit with failure exit code."""
    cli_message("ERROR", text)
    sys.exit(1)
