import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from libsnakepp.exceptions import SnakeppError
from snakepp.cli.output import cli_fatal_abort, cli_message


@contextmanager
def cli_snakepp_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Wrap function to properly emit Snakepp internal errors."""
    try:
        yield
    except SnakeppError as se:
        if debug_user_friendly_errors:
            return cli_fatal_abort(repr(se))
        raise  # re-throw exception due to unfriendly flag set for debugging
    except BrokenPipeError:
        # Output consumer was closed (e.g `snakepp main.c | head`)
        sys.stderr.close()
        return sys.exit(1)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(0)
    # This is unreachable but error wrapper must fail
    cli_fatal_abort("Bug in a CLI: error handler must has no-return")
