"""Lexer package that provides lexical analysis of C-like source code."""

from .lexer import tokenize_from_raw
from .tokens import Token, TokenLocation, TokenType

__all__ = [
    "Token",
    "TokenLocation",
    "TokenType",
    "tokenize_from_raw",
]
