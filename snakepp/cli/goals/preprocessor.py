from __future__ import annotations

import sys
from functools import partial
from typing import TYPE_CHECKING, NoReturn

from libsnakepp.lexer import TokenLocation, tokenize_from_raw
from libsnakepp.lexer.io import open_source_file_line_stream
from libsnakepp.lexer.lexer import debug_lexer_wrapper
from libsnakepp.preprocessor import Preprocessor
from libsnakepp.preprocessor.macros import registry_from_raw_definitions
from snakepp.cli.macro_modules import load_macro_modules
from snakepp.cli.output import cli_message

if TYPE_CHECKING:
    from snakepp.cli.parser.arguments import CLIArguments


def cli_perform_preprocess_goal(args: CLIArguments) -> NoReturn:
    """Perform preprocess goal that emits preprocessed tokens into stdout."""
    assert len(args.source_filepaths) == 1, (
        "Cannot perform preprocessor goal without single source file!"
    )

    macros_registry = registry_from_raw_definitions(
        location=TokenLocation.cli(),
        definitions=args.definitions,
    )
    preprocessor = Preprocessor(
        include_search_paths=args.include_paths,
        user_include_search_paths=args.user_include_paths,
        macros=macros_registry,
        on_function_macro_call=partial(
            _log_function_macro_call,
            verbose=args.verbose,
        ),
    )

    load_macro_modules(preprocessor, args.macro_modules)
    cli_message(
        "INFO",
        f"Loaded {len(args.macro_modules)} macro module(s), {len(preprocessor.macros)} macro(s) defined",
        verbose=args.verbose,
    )

    path = args.source_filepaths[0]
    io = open_source_file_line_stream(path)
    lexer = tokenize_from_raw(path, io)
    if args.lexer_debug_emit_lexemes:
        lexer = debug_lexer_wrapper(lexer)

    for index, token in enumerate(preprocessor.preprocess(path, lexer)):
        print(token.text if index == 0 else f" {token.text}", end="")
    print()

    return sys.exit(0)


def _log_function_macro_call(
    name: str,
    location: TokenLocation,
    *,
    verbose: bool,
) -> None:
    cli_message(
        "INFO",
        f"Invoking function macro '{name}' at {location}",
        verbose=verbose,
    )
