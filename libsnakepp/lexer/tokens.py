from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from pathlib import Path

    from libsnakepp.lexer.keywords import PreprocessorKeyword


TokenSource = Literal["file", "cli", "toolchain", "scratch"]


@dataclass(frozen=True)
class TokenLocation:
    """Location of any token within source code file."""

    line_number: int
    col_number: int

    filepath: Path | None = None
    source: TokenSource = "file"

    def __post_init__(self) -> None:
        if self.source == "file":
            assert self.filepath is not None

    def __repr__(self) -> str:
        if self.source == "cli":
            return "'(command-line-interface)'"
        if self.source == "toolchain":
            return "'(snakepp-toolchain-internals)'"
        if self.source == "scratch":
            return f"'(function-macro-expansion):{self.col_number + 1}'"
        assert self.filepath is not None
        return f"'{self.filepath.name}:{self.line_number + 1}:{self.col_number + 1}'"

    def __str__(self) -> str:
        return self.__repr__().strip("'")

    @classmethod
    def cli(cls) -> TokenLocation:
        """Create a location for command-line originated tokens."""
        return cls(
            line_number=0,
            col_number=0,
            source="cli",
        )

    @classmethod
    def toolchain(cls) -> TokenLocation:
        """Create a location for toolchain originated tokens."""
        return cls(
            line_number=0,
            col_number=0,
            source="toolchain",
        )


class TokenType(IntEnum):
    """Type of the lexical token.

    Punctuators each have their own type so consumers can match on them directly,
    e.g `1 + 2` is lexed as `INTEGER PLUS INTEGER`.
    https://en.wikipedia.org/wiki/Lexical_analysis
    """

    # Numerical
    INTEGER = auto()
    FLOAT = auto()

    # Text
    CHARACTER = auto()
    STRING = auto()

    # Language
    IDENTIFIER = auto()
    KEYWORD = auto()  # Preprocessor directives only (e.g `#define`)

    # Brackets and parentheses
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LCURLY = auto()  # {
    RCURLY = auto()  # }

    # Punctuation
    DOT = auto()  # .
    ELLIPSIS = auto()  # ...
    ARROW = auto()  # ->
    COMMA = auto()  # ,
    SEMICOLON = auto()  # ;
    COLON = auto()  # :
    QUESTION = auto()  # ?
    HASH = auto()  # #
    HASH_HASH = auto()  # ##

    # Arithmetic
    PLUS = auto()  # +
    PLUS_PLUS = auto()  # ++
    PLUS_ASSIGN = auto()  # +=
    MINUS = auto()  # -
    MINUS_MINUS = auto()  # --
    MINUS_ASSIGN = auto()  # -=
    STAR = auto()  # *
    STAR_ASSIGN = auto()  # *=
    SLASH = auto()  # /
    SLASH_ASSIGN = auto()  # /=
    PERCENT = auto()  # %
    PERCENT_ASSIGN = auto()  # %=

    # Bitwise and logical
    AMPERSAND = auto()  # &
    AMPERSAND_AMPERSAND = auto()  # &&
    AMPERSAND_ASSIGN = auto()  # &=
    PIPE = auto()  # |
    PIPE_PIPE = auto()  # ||
    PIPE_ASSIGN = auto()  # |=
    CARET = auto()  # ^
    CARET_ASSIGN = auto()  # ^=
    TILDE = auto()  # ~
    EXCLAMATION = auto()  # !
    SHIFT_LEFT = auto()  # <<
    SHIFT_LEFT_ASSIGN = auto()  # <<=
    SHIFT_RIGHT = auto()  # >>
    SHIFT_RIGHT_ASSIGN = auto()  # >>=

    # Comparison and assignment
    ASSIGNMENT = auto()  # =
    EQUAL = auto()  # ==
    NOT_EQUAL = auto()  # !=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=

    # Content
    EOF = auto()
    EOL = auto()


@dataclass(frozen=True)
class Token:
    """Lexical token obtained by lexer."""

    type: TokenType

    # Real text of an token within source code
    text: str

    # `pre-parsed` value (e.g numbers are numbers, string are unescaped)
    value: int | float | str | PreprocessorKeyword

    # Location within file
    location: TokenLocation

    has_trailing_whitespace: bool = True
