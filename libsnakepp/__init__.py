"""Snakepp library.

Preprocessor for C-like languages which allows macros to be expanded by Python callables.
"""

from .preprocessor import Preprocessor

__all__ = [
    "Preprocessor",
]
