from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, cast

from snakepp.cli.output import cli_fatal_abort
from snakepp.cli.parser.arguments import CLIArguments

if TYPE_CHECKING:
    from argparse import Namespace


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    source_filepaths = _process_source_filepaths(args)
    definitions = _process_definitions(args)
    include_paths = _process_include_paths(args.include)
    user_include_paths = _process_include_paths(args.include_quoted)
    macro_modules = _process_macro_modules(args)

    return CLIArguments(
        # Goals.
        version=bool(args.version),
        # Rest of these are mostly goal-specific
        verbose=bool(args.verbose),
        source_filepaths=source_filepaths,
        definitions=definitions,
        include_paths=include_paths,
        user_include_paths=user_include_paths,
        macro_modules=macro_modules,
        lexer_debug_emit_lexemes=bool(args.lexer_debug_emit_lexemes),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _process_definitions(args: Namespace) -> dict[str, str]:
    """Process CLI propagated definitions as raw macro source text that requires lexing / parsing."""
    user_definitions: dict[str, str] = {}

    raw_definitions = cast("list[str]", args.definitions)
    for cli_definition in raw_definitions:
        if "=" in cli_definition:
            name, value = cli_definition.split("=", maxsplit=1)
            user_definitions[name] = value

            continue
        user_definitions[cli_definition] = "1"

    return user_definitions


def _process_source_filepaths(args: Namespace) -> list[Path]:
    """Process input source files as paths and validate it."""
    goal_requires_source = not args.version
    paths = [Path(f) for f in args.source_files]
    if not goal_requires_source:
        return paths

    if len(paths) != 1:
        return cli_fatal_abort(
            "Expected single source file to preprocess (there is no linkage, so each file is preprocessed separately)!",
        )

    if any(not p.is_file() for p in paths):
        return cli_fatal_abort(
            text="Input source file is not exists, aborting preprocessing as safe mechanism.",
        )

    return paths


def _process_include_paths(includes: list[str]) -> list[Path]:
    """Process user propagated include paths."""
    include_paths = [Path(include) for include in includes]

    if any(not p.is_dir() for p in include_paths):
        return cli_fatal_abort(
            text="One of user include path is not exists or is not an directory, aborting preprocessing as safe mechanism.",
        )

    return include_paths


def _process_macro_modules(args: Namespace) -> list[Path]:
    """Process Python files with function macros definitions."""
    macro_modules = [Path(module) for module in args.macro_modules]

    if any(not p.is_file() or p.suffix != ".py" for p in macro_modules):
        return cli_fatal_abort(
            text="One of macro module is not exists or is not an Python (`.py`) file.",
        )

    return macro_modules
