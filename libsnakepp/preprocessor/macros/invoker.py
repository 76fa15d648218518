"""Invocation of function macros (macros which are expanded by Python callables)."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from libsnakepp.exceptions import SnakeppError

from .bridge import BoxedToken, encode_token, retokenize
from .context import InvocationContext, bind_invocation_context
from .exceptions import (
    FunctionMacroAllocationError,
    FunctionMacroCallError,
    FunctionMacroTokenizationError,
)
from .results import (
    EmptyExpansion,
    TextExpansion,
    TokensExpansion,
    classify_function_macro_result,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from libsnakepp.lexer.tokens import Token, TokenLocation

    from .macro import FunctionMacro


def invoke_function_macro(
    macro: FunctionMacro,
    expansion_location: TokenLocation,
    arguments: Sequence[Token],
) -> list[Token]:
    """Call function of an macro with given argument tokens and acquire replacement tokens.

    Either returns whole replacement or raises `FunctionMacroError`, never partial replacement.
    """
    boxed_arguments: tuple[object, ...] = _marshal_arguments(
        macro,
        expansion_location,
        arguments,
    )
    context = InvocationContext(
        preprocessor=macro.preprocessor,
        location=expansion_location,
        name=macro.name,
    )
    if macro.pass_context:
        boxed_arguments = (context, *boxed_arguments)

    with bind_invocation_context(context):
        result = _call_function(macro, expansion_location, boxed_arguments)

    expansion = classify_function_macro_result(
        result,
        name=macro.name,
        location=expansion_location,
    )
    match expansion:
        case EmptyExpansion():
            return []
        case TextExpansion(text=text):
            return _retokenize_text(macro, expansion_location, text)
        case TokensExpansion(tokens=tokens):
            return list(tokens)
        case _:
            assert_never(expansion)


def _marshal_arguments(
    macro: FunctionMacro,
    expansion_location: TokenLocation,
    arguments: Sequence[Token],
) -> tuple[BoxedToken, ...]:
    """Box each argument token, in order (arity is not validated, function will fail by itself)."""
    try:
        return tuple(encode_token(macro.preprocessor, token) for token in arguments)
    except MemoryError as e:
        raise FunctionMacroAllocationError(macro.name, expansion_location) from e


def _call_function(
    macro: FunctionMacro,
    expansion_location: TokenLocation,
    arguments: tuple[object, ...],
) -> object:
    try:
        return macro.function(*arguments)
    except Exception as e:  # noqa: BLE001
        raise FunctionMacroCallError(macro.name, expansion_location, error=e) from e


def _retokenize_text(
    macro: FunctionMacro,
    expansion_location: TokenLocation,
    text: bytes,
) -> list[Token]:
    """Tokenize text returned by function, lexer errors are attributed to an invocation."""
    try:
        return retokenize(macro.preprocessor, text)
    except SnakeppError as e:
        raise FunctionMacroTokenizationError(
            macro.name,
            expansion_location,
            error=e,
        ) from e
