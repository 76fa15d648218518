import argparse
from argparse import ArgumentParser


def add_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with debug options into given parser."""
    group = parser.add_argument_group("Debug", "Logging and error reporting")

    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from preprocessor (e.g function macros invocations).",
    )

    group.add_argument(
        "--no-user-friendly-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        default=True,
        help="If passed, errors will be raised with traceback instead of user-friendly message.",
    )


def add_toolchain_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject internal toolchain debug options into given parser."""
    parser.add_argument(
        "--debug-emit-lexemes",
        dest="lexer_debug_emit_lexemes",
        action="store_true",
        help=argparse.SUPPRESS,
    )


def add_preprocessor_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with preprocessor options into given parser."""
    group = parser.add_argument_group(
        title="Preprocessor",
        description="Flags for the preprocessor.",
    )
    group.add_argument(
        "--include",
        "-I",
        required=False,
        help="Additional directories to search for include files.",
        action="append",
        default=[],
    )
    group.add_argument(
        "--include-quoted",
        "-iquote",
        required=False,
        help="Additional directories to search only for quoted (`#include \"file\"`) include files.",
        action="append",
        dest="include_quoted",
        default=[],
    )
    group.add_argument(
        "--define",
        "-D",
        required=False,
        help="Define an macro (default value is '1')",
        action="append",
        dest="definitions",
        default=[],
    )
    group.add_argument(
        "--macros",
        "-M",
        required=False,
        help="Python file which defines function macros with `define_macros(preprocessor)` function.",
        action="append",
        dest="macro_modules",
        default=[],
    )
