import sys
from importlib.metadata import PackageNotFoundError, version
from platform import platform, python_implementation, python_version
from typing import NoReturn

from libsnakepp.preprocessor.include import MAX_INCLUDE_DEPTH
from libsnakepp.lexer.keywords import KEYWORD_TO_NAME
from snakepp.cli.parser.arguments import CLIArguments


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    assert args.version, "Cannot perform version goal with no version flag set!"

    print("[Snakepp toolchain]")
    print(f"\tVersion: {_get_toolchain_version()}")
    print("Preprocessor:")
    print(f"\tDirectives: {', '.join(KEYWORD_TO_NAME.values())}")
    print(f"\tMaximal include depth: {MAX_INCLUDE_DEPTH}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    return sys.exit(0)


def _get_toolchain_version() -> str:
    try:
        return version("snakepp")
    except PackageNotFoundError:
        # Running from source tree without installation
        return "(not installed)"
