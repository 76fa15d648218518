from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole Snakepp toolchain process."""

    source_filepaths: list[Path]

    include_paths: list[Path]
    user_include_paths: list[Path]
    definitions: dict[str, str]

    # Python files which define function macros (via `define_macros(preprocessor)`)
    macro_modules: list[Path]

    version: bool

    verbose: bool

    lexer_debug_emit_lexemes: bool
    cli_debug_user_friendly_errors: bool
