"""Lexer support for numeric literals (integers and floats)."""

from __future__ import annotations

import re
from string import digits, hexdigits, octdigits
from typing import TYPE_CHECKING

from libsnakepp.lexer.errors import (
    AmbiguousHexadecimalAlphabetError,
    InvalidNumericLiteralError,
)
from libsnakepp.lexer.helpers import is_identifier_symbol
from libsnakepp.lexer.tokens import Token, TokenLocation, TokenType

if TYPE_CHECKING:
    from libsnakepp.lexer._state import LexerState

HEXADECIMAL_MARK = "0x"
BINARY_MARK = "0b"
OCTAL_MARK = "0"

INTEGER_SUFFIXES = "uUlL"
FLOAT_SUFFIXES = "fFlL"

_FLOAT_PATTERN = re.compile(r"(\d+\.\d*|\.\d+)([eE][+-]?\d+)?|\d+[eE][+-]?\d+")


def is_numeric_literal_start(line: str, col: int) -> bool:
    """Is given column starts numeric literal (e.g `1` or `.5`)?."""
    if line[col] in digits:
        return True
    return line[col] == "." and col + 1 < len(line) and line[col + 1] in digits


def is_valid_hexadecimal(text: str) -> bool:
    """Is given raw text cans be parsed as hexadecimal?."""
    text = text[len(HEXADECIMAL_MARK) :]
    return bool(text) and all(c in hexdigits for c in text)


def is_valid_binary(text: str) -> bool:
    text = text[len(BINARY_MARK) :]
    return bool(text) and all(c in "01" for c in text)


def is_valid_octal(text: str) -> bool:
    return text.startswith(OCTAL_MARK) and all(c in octdigits for c in text)


def is_valid_integer(text: str) -> bool:
    """Is given raw text can be parsed as integer?."""
    return text.isdigit()


def is_valid_float(text: str) -> bool:
    """Is given raw text can be parsed as float?."""
    return _FLOAT_PATTERN.fullmatch(text) is not None


def tokenize_numeric_literal(state: LexerState) -> Token:
    """Tokenize number at cursor into integer / float token or raise error if it is malformed."""
    assert is_numeric_literal_start(state.line, state.col), (
        f"{tokenize_numeric_literal.__name__} must be called when cursor is at number start"
    )
    location = state.current_location()

    ends_at = _find_numeric_literal_end(state.line, state.col)
    word = state.line[state.col : ends_at]
    state.col = ends_at

    token_type, value = _parse_numeric_literal(word, location)
    return Token(
        type=token_type,
        text=word,
        value=value,
        location=location,
        has_trailing_whitespace=state.has_trailing_whitespace(),
    )


def _parse_numeric_literal(
    word: str,
    location: TokenLocation,
) -> tuple[TokenType, int | float]:
    lowered = word.lower()

    if lowered.startswith(HEXADECIMAL_MARK):
        number = lowered.rstrip(INTEGER_SUFFIXES.lower())
        if not is_valid_hexadecimal(number):
            raise AmbiguousHexadecimalAlphabetError(at=location, number_raw=word)
        return TokenType.INTEGER, int(number, 16)

    if lowered.startswith(BINARY_MARK):
        number = lowered.rstrip(INTEGER_SUFFIXES.lower())
        if not is_valid_binary(number):
            raise InvalidNumericLiteralError(at=location, number_raw=word)
        return TokenType.INTEGER, int(number[len(BINARY_MARK) :], 2)

    number = lowered.rstrip(INTEGER_SUFFIXES.lower())
    if is_valid_integer(number):
        if len(number) > 1 and number.startswith(OCTAL_MARK):
            if not is_valid_octal(number):
                raise InvalidNumericLiteralError(at=location, number_raw=word)
            return TokenType.INTEGER, int(number, 8)
        return TokenType.INTEGER, int(number, 10)

    number = lowered.removesuffix("f").removesuffix("l")
    if is_valid_float(number):
        return TokenType.FLOAT, float(number)

    raise InvalidNumericLiteralError(at=location, number_raw=word)


def _find_numeric_literal_end(line: str, col: int) -> int:
    """Find end of an `preprocessing number` (digits, letters, dots and signed exponents)."""
    end = len(line)
    while col < end:
        symbol = line[col]
        if is_identifier_symbol(symbol) or symbol == ".":
            col += 1
            continue
        if symbol in "+-" and line[col - 1] in "eE" and not _is_hexadecimal_prefixed(line, col):
            col += 1
            continue
        break
    return col


def _is_hexadecimal_prefixed(line: str, col: int) -> bool:
    """Is number ending at given column is an hexadecimal (e.g `0xE+1` is `0xE` `+` `1`)."""
    start = col
    while start > 0 and (is_identifier_symbol(line[start - 1]) or line[start - 1] == "."):
        start -= 1
    return line[start : start + len(HEXADECIMAL_MARK)].lower() == HEXADECIMAL_MARK
