from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from libsnakepp.lexer.io import open_source_file_line_stream
from libsnakepp.lexer.keywords import PreprocessorKeyword
from libsnakepp.lexer.lexer import tokenize_from_raw
from libsnakepp.lexer.tokens import Token, TokenType

from .exceptions import (
    PreprocessorIncludeDepthExceededError,
    PreprocessorIncludeFileNotFoundError,
    PreprocessorIncludeMalformedError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from libsnakepp.preprocessor._state import PreprocessorState

# Same limit as GNU C preprocessor has
MAX_INCLUDE_DEPTH = 200


def resolve_include_from_token_into_state(
    token: Token,
    state: PreprocessorState,
) -> None:
    """Resolve include directive and push included file tokens on top of an state."""
    assert token.type == TokenType.KEYWORD
    assert token.value == PreprocessorKeyword.INCLUDE

    target, is_system = _consume_include_target(token, state)
    candidates = _include_path_candidates(
        target,
        is_system=is_system,
        current_path=state.current_path,
        user_search_paths=state.user_include_search_paths,
        system_search_paths=state.include_search_paths,
    )

    path = next((p for p in candidates if p.is_file()), None)
    if path is None:
        raise PreprocessorIncludeFileNotFoundError(
            location=token.location,
            target=target,
            searched=[p.parent for p in candidates],
        )

    if state.include_depth >= MAX_INCLUDE_DEPTH:
        raise PreprocessorIncludeDepthExceededError(
            location=token.location,
            depth=MAX_INCLUDE_DEPTH,
        )

    io = open_source_file_line_stream(path)
    state.push_file(path, tokenize_from_raw(path, io))


def _include_path_candidates(
    target: str,
    *,
    is_system: bool,
    current_path: Path | None,
    user_search_paths: Iterable[Path],
    system_search_paths: Iterable[Path],
) -> list[Path]:
    """Quoted includes are searched near the including file, then within user and system search paths.

    System (`<>`) ones are searched only within system search paths.
    """
    if Path(target).is_absolute():
        return [Path(target)]

    candidates: list[Path] = []
    if not is_system:
        if current_path is not None:
            candidates.append(current_path.parent / target)
        candidates.extend(search_path / target for search_path in user_search_paths)
    candidates.extend(search_path / target for search_path in system_search_paths)
    return candidates


def _consume_include_target(
    token: Token,
    state: PreprocessorState,
) -> tuple[str, bool]:
    """Consume whole include directive line into include target and is it an system (`<>`) one."""
    line: list[Token] = []
    while (next_token := next(state.tokenizer, None)) and next_token.type not in (
        TokenType.EOL,
        TokenType.EOF,
    ):
        line.append(next_token)

    match line:
        case [Token(type=TokenType.STRING, value=str(target))] if target:
            return target, False
        case [
            Token(type=TokenType.LESS),
            *inner,
            Token(type=TokenType.GREATER),
        ] if inner:
            return "".join(t.text for t in inner), True
        case _:
            raise PreprocessorIncludeMalformedError(location=token.location)
