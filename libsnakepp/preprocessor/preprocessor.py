from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from libsnakepp.lexer.io import open_source_file_line_stream
from libsnakepp.lexer.keywords import PreprocessorKeyword
from libsnakepp.lexer.lexer import tokenize_from_raw
from libsnakepp.lexer.tokens import Token, TokenLocation, TokenType

from ._state import PreprocessorState
from .conditions import (
    CONDITIONAL_KEYWORDS,
    ensure_conditional_blocks_closed,
    resolve_conditional_block_from_token,
)
from .include import resolve_include_from_token_into_state
from .macros import MacrosRegistry
from .macros.names import ensure_macro_may_be_undefined, validate_macro_name
from .macros.preprocessor import (
    consume_macro_definition_from_token,
    consume_macro_undefine_from_token,
    try_resolve_and_expand_macro_reference_from_token,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Generator, Iterable

    from .macros import FunctionMacro, Macro


class Preprocessor:
    """Configurable preprocessor, also an handle given to function macros.

    Owns macros registry and include search paths which are shared by every preprocessed file,
    so macros defined within one file are visible within next ones (as for single translation unit).
    """

    def __init__(
        self,
        *,
        include_search_paths: Iterable[Path] = (),
        user_include_search_paths: Iterable[Path] = (),
        macros: MacrosRegistry | None = None,
        on_function_macro_call: Callable[[str, TokenLocation], None] | None = None,
    ) -> None:
        # System (`<file>`) include search paths, also searched by quoted includes after user ones
        self.include_search_paths = list(include_search_paths)
        # User (`"file"`) include search paths, searched only by quoted includes
        self.user_include_search_paths = list(user_include_search_paths)
        self.macros = macros if macros is not None else MacrosRegistry()

        # Called right before each function macro invocation (e.g for logging)
        self.on_function_macro_call = on_function_macro_call

    def add_include_path(self, path: Path, *, system: bool = True) -> bool:
        """Add an include search path, system one (for `<file>` and `"file"`) or user one (for `"file"` only).

        :returns added: False if path is not an directory (it is not added in that case)
        """
        if not path.is_dir():
            return False
        if system:
            self.include_search_paths.append(path)
        else:
            self.user_include_search_paths.append(path)
        return True

    def define(
        self,
        name: str,
        definition: str | Callable[..., object] = "1",
        *,
        location: TokenLocation | None = None,
        pass_context: bool = False,
        predefined: bool = False,
    ) -> Macro | FunctionMacro:
        """Define an macro, plain old one from text or function one from callable.

        Anything that is not a text is treated as function to call on each invocation.
        Predefined macros cannot be undefined (neither via `#undef` nor via `undefine`).
        """
        location = location or TokenLocation.toolchain()
        validate_macro_name(name, location, self.macros)

        if isinstance(definition, str):
            return self.macros.new_from_raw(
                location,
                name,
                definition,
                predefined=predefined,
            )

        return self.macros.new_function(
            location,
            name,
            preprocessor=self,
            function=definition,
            pass_context=pass_context,
            predefined=predefined,
        )

    def undefine(self, name: str) -> None:
        ensure_macro_may_be_undefined(name, TokenLocation.toolchain(), self.macros)
        self.macros.pop(name)

    def is_defined(self, name: str) -> bool:
        return name in self.macros

    def tokenize(self, text: bytes) -> list[Token]:
        """Tokenize UTF-8 text with lexer of that preprocessor (tokens are not preprocessed)."""
        lines = text.decode("utf-8").splitlines()
        return [
            token
            for token in tokenize_from_raw("scratch", lines)
            if token.type not in (TokenType.EOL, TokenType.EOF)
        ]

    def preprocess(self, path: Path, lexer: Iterable[Token]) -> Generator[Token]:
        """Preprocess given lexer token stream by resolving includes, conditions and macros.

        Simply, wraps an lexer into another `lexer` and preprocess on the fly.
        """
        state = PreprocessorState(preprocessor=self)
        state.push_file(path, lexer)
        return preprocess_tokens(state)

    def preprocess_file(self, path: Path) -> Generator[Token]:
        io = open_source_file_line_stream(path)
        return self.preprocess(path, tokenize_from_raw(path, io))

    def preprocess_source(
        self,
        source: str,
        *,
        path: Path | None = None,
    ) -> Generator[Token]:
        """Preprocess in-memory source, located at given path (affects locations and relative includes)."""
        path = path or Path("<input>")
        return self.preprocess(path, tokenize_from_raw(path, source.splitlines()))


def preprocess_tokens(state: PreprocessorState) -> Generator[Token]:
    """Preprocess tokens from given state, yielding resulting tokens (without `EOL`/`EOF`)."""
    for token in state.tokenizer:
        if not state.is_active_block:
            if token.type == TokenType.KEYWORD and token.value in CONDITIONAL_KEYWORDS:
                resolve_conditional_block_from_token(token, state)
            continue

        if token.type == TokenType.KEYWORD and state.is_rescanning_expansion:
            # Expansions cannot form directives
            yield token
            continue

        match token:
            case Token(type=TokenType.KEYWORD, value=PreprocessorKeyword.INCLUDE):
                resolve_include_from_token_into_state(token, state)
            case Token(type=TokenType.KEYWORD, value=PreprocessorKeyword.DEFINE):
                consume_macro_definition_from_token(token, state)
            case Token(type=TokenType.KEYWORD, value=PreprocessorKeyword.UNDEFINE):
                consume_macro_undefine_from_token(token, state)
            case Token(type=TokenType.KEYWORD, value=keyword) if (
                keyword in CONDITIONAL_KEYWORDS
            ):
                resolve_conditional_block_from_token(token, state)
            case Token(type=TokenType.IDENTIFIER):
                if try_resolve_and_expand_macro_reference_from_token(token, state):
                    continue
                yield token
            case Token(type=TokenType.EOL) | Token(type=TokenType.EOF):
                # EOL is usable only by preprocessor, so we drop that
                pass
            case _:
                yield token

    ensure_conditional_blocks_closed(state)
