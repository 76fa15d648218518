"""Preprocessor macros parser/resolver, including function macros (expanded by Python callables)."""

from .bridge import BoxedToken, decode_token, encode_token, retokenize
from .context import InvocationContext, current_invocation_context
from .macro import FunctionMacro, Macro
from .preprocessor import (
    consume_macro_definition_from_token,
    consume_macro_undefine_from_token,
    try_resolve_and_expand_macro_reference_from_token,
)
from .registry import MacrosRegistry, registry_from_raw_definitions

__all__ = (
    "BoxedToken",
    "FunctionMacro",
    "InvocationContext",
    "Macro",
    "MacrosRegistry",
    "consume_macro_definition_from_token",
    "consume_macro_undefine_from_token",
    "current_invocation_context",
    "decode_token",
    "encode_token",
    "registry_from_raw_definitions",
    "retokenize",
    "try_resolve_and_expand_macro_reference_from_token",
)
