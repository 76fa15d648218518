from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from libsnakepp.lexer._state import LexerState
from libsnakepp.lexer.errors import UnclosedBlockCommentError, UnexpectedSymbolError
from libsnakepp.lexer.helpers import (
    find_identifier_end,
    find_word_start,
    is_identifier_start,
    join_continued_lines,
)
from libsnakepp.lexer.keywords import DIRECTIVE_TO_PREPROCESSOR_KEYWORD
from libsnakepp.lexer.literals import (
    tokenize_character_literal,
    tokenize_numeric_literal,
    tokenize_string_literal,
)
from libsnakepp.lexer.literals.numeric import is_numeric_literal_start
from libsnakepp.lexer.punctuators import PUNCTUATORS_MAPPING, match_punctuator
from libsnakepp.lexer.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable
    from pathlib import Path


SINGLE_LINE_COMMENT = "//"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
DIRECTIVE_MARK = "#"


def tokenize_from_raw(
    source: Path | Literal["cli", "toolchain", "scratch"],
    lines: Iterable[str],
) -> Generator[Token]:
    """Stream lexical tokens via generator (perform lexical analysis).

    Lines are logical ones, so physical lines ending with backslash are joined.
    Each line is terminated with `EOL` token as preprocessor directives are line-dependant.

    :returns tokenizer: Generator of tokens, in order from top to bottom of an file (default order)
    """
    state = LexerState(path=source)

    for row, line in join_continued_lines(lines):
        state.set_line(row, line)

        col_ends_at = len(state.line)
        while state.col < col_ends_at and (token := _tokenize_line_next_token(state)):
            yield token

        if state.block_comment_opened_at is None:
            # Lines fully inside block comment are not an lines for preprocessor
            yield Token(
                type=TokenType.EOL,
                text="\n",
                value=0,
                location=state.current_location(),
            )

    if state.block_comment_opened_at is not None:
        raise UnclosedBlockCommentError(opened_at=state.block_comment_opened_at)

    yield Token(
        type=TokenType.EOF,
        text="\n",
        value=0,
        location=state.current_location(),
    )


def _tokenize_line_next_token(state: LexerState) -> Token | None:
    """Acquire token from current state and modify it to apply next tokenize, or None if reached end (EOL/EOF).

    :returns token: Token from state or None if state must go to the next line (no tokens).
    """
    if not _skip_whitespace_and_comments(state):
        return None

    token = _tokenize_symbol_at_cursor(state)
    state.at_line_start = False
    return token


def _tokenize_symbol_at_cursor(state: LexerState) -> Token:
    # First symbol of an token, literals are tokenized exclusively due to their variadic length
    symbol = state.line[state.col]

    match symbol:
        case "'":
            return tokenize_character_literal(state)
        case '"':
            return tokenize_string_literal(state)
        case _ if is_numeric_literal_start(state.line, state.col):
            return tokenize_numeric_literal(state)
        case _ if is_identifier_start(symbol):
            return _tokenize_identifier(state)
        case "#" if state.at_line_start and (token := _try_tokenize_directive(state)):
            return token
        case _:
            return _tokenize_punctuator(state)


def _skip_whitespace_and_comments(state: LexerState) -> bool:
    """Move cursor to the next token start skipping comments.

    :returns has_token: False if there is nothing left on current line.
    """
    line = state.line
    while True:
        if state.block_comment_opened_at is not None:
            close_at = line.find(BLOCK_COMMENT_CLOSE, state.col)
            if close_at == -1:
                state.col = len(line)
                return False
            state.block_comment_opened_at = None
            state.col = close_at + len(BLOCK_COMMENT_CLOSE)

        state.col = find_word_start(line, state.col)
        if state.col >= len(line):
            return False

        if line.startswith(SINGLE_LINE_COMMENT, state.col):
            # Next words were prefixed with comment mark - skip whole line.
            state.col = len(line)
            return False

        if line.startswith(BLOCK_COMMENT_OPEN, state.col):
            state.block_comment_opened_at = state.current_location()
            state.col += len(BLOCK_COMMENT_OPEN)
            continue

        return True


def _tokenize_identifier(state: LexerState) -> Token:
    location = state.current_location()
    ends_at = find_identifier_end(state.line, state.col)
    word = state.line[state.col : ends_at]
    state.col = ends_at

    return Token(
        type=TokenType.IDENTIFIER,
        text=word,
        value=word,
        location=location,
        has_trailing_whitespace=state.has_trailing_whitespace(),
    )


def _try_tokenize_directive(state: LexerState) -> Token | None:
    """Try to consume `#` with directive name after it into an keyword (e.g `#define`).

    Unknown directives (e.g `#pragma`) are left for punctuator `#`.
    """
    location = state.current_location()
    name_starts_at = find_word_start(state.line, state.col + len(DIRECTIVE_MARK))
    name_ends_at = find_identifier_end(state.line, name_starts_at)
    name = state.line[name_starts_at:name_ends_at]

    if not (keyword := DIRECTIVE_TO_PREPROCESSOR_KEYWORD.get(name)):
        return None

    state.col = name_ends_at
    return Token(
        type=TokenType.KEYWORD,
        text=f"{DIRECTIVE_MARK}{name}",
        value=keyword,
        location=location,
        has_trailing_whitespace=state.has_trailing_whitespace(),
    )


def _tokenize_punctuator(state: LexerState) -> Token:
    location = state.current_location()
    if not (punctuator := match_punctuator(state.line, state.col)):
        raise UnexpectedSymbolError(at=location, symbol=state.line[state.col])

    state.col += len(punctuator)
    return Token(
        type=PUNCTUATORS_MAPPING[punctuator],
        text=punctuator,
        value=punctuator,
        location=location,
        has_trailing_whitespace=state.has_trailing_whitespace(),
    )


def debug_lexer_wrapper(lexer: Generator[Token]) -> Generator[Token]:
    for token in lexer:
        print(token.type.name, token.value, token.location)
        yield token
