"""Resolving of `#include` directives."""

from .include import (
    MAX_INCLUDE_DEPTH,
    resolve_include_from_token_into_state,
)

__all__ = (
    "MAX_INCLUDE_DEPTH",
    "resolve_include_from_token_into_state",
)
