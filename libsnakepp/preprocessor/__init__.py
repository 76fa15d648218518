"""Preprocessor for C-like languages (includes, conditional blocks, macros and function macros)."""

from .preprocessor import Preprocessor, preprocess_tokens

__all__ = (
    "Preprocessor",
    "preprocess_tokens",
)
