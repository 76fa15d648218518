"""Errors collections that lexer may raise (user-facing ones)."""

from .ambiguous_hexadecimal_alphabet import AmbiguousHexadecimalAlphabetError
from .empty_character_literal import EmptyCharacterLiteralError
from .excessive_character_length import ExcessiveCharacterLengthError
from .invalid_numeric_literal import InvalidNumericLiteralError
from .unclosed_block_comment import UnclosedBlockCommentError
from .unclosed_character_quote import UnclosedCharacterQuoteError
from .unclosed_string_quote import UnclosedStringQuoteError
from .unexpected_symbol import UnexpectedSymbolError

__all__ = [
    "AmbiguousHexadecimalAlphabetError",
    "EmptyCharacterLiteralError",
    "ExcessiveCharacterLengthError",
    "InvalidNumericLiteralError",
    "UnclosedBlockCommentError",
    "UnclosedCharacterQuoteError",
    "UnclosedStringQuoteError",
    "UnexpectedSymbolError",
]
