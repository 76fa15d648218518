"""Classification of values returned by function macros."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .bridge import BoxedToken, decode_token
from .exceptions import FunctionMacroEncodingError, FunctionMacroResultTypeError

if TYPE_CHECKING:
    from libsnakepp.lexer.tokens import Token, TokenLocation


@dataclass(frozen=True, slots=True)
class EmptyExpansion:
    """Function macro returned nothing, invocation expands into nothing."""


@dataclass(frozen=True, slots=True)
class TextExpansion:
    """Function macro returned text which must be tokenized."""

    # Valid UTF-8
    text: bytes


@dataclass(frozen=True, slots=True)
class TokensExpansion:
    """Function macro returned tokens which are used as-is."""

    tokens: tuple[Token, ...]


MacroExpansion = EmptyExpansion | TextExpansion | TokensExpansion


def classify_function_macro_result(
    result: object,
    *,
    name: str,
    location: TokenLocation,
) -> MacroExpansion:
    """Classify value returned by function macro into expansion or raise error if it is not expandable.

    `None` is checked first, then text (`str`, `bytes`), then any other sequence (of tokens).
    Sequences are all-or-nothing: single non-token element rejects whole result.
    """
    if result is None:
        return EmptyExpansion()

    if isinstance(result, str):
        try:
            text = result.encode("utf-8")
        except UnicodeEncodeError as e:
            raise FunctionMacroEncodingError(name, location, reason=str(e)) from e
        return TextExpansion(text=text)

    if isinstance(result, bytes | bytearray):
        text = bytes(result)
        try:
            text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FunctionMacroEncodingError(name, location, reason=str(e)) from e
        return TextExpansion(text=text)

    if isinstance(result, Sequence):
        return TokensExpansion(tokens=_decode_tokens(result, name=name, location=location))

    raise FunctionMacroResultTypeError(name, location, result=result)


def _decode_tokens(
    result: Sequence[object],
    *,
    name: str,
    location: TokenLocation,
) -> tuple[Token, ...]:
    tokens: list[Token] = []
    for index, element in enumerate(result):
        if not isinstance(element, BoxedToken):
            raise FunctionMacroResultTypeError(
                name,
                location,
                result=element,
                index=index,
            )
        tokens.append(decode_token(element))
    return tuple(tokens)
