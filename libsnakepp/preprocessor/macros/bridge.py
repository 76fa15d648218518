"""Conversion between preprocessor tokens and token handles given to function macros."""

from __future__ import annotations

from typing import TYPE_CHECKING, final

from .exceptions import TokenHandleTypeError

if TYPE_CHECKING:
    from libsnakepp.lexer.tokens import Token, TokenLocation, TokenType
    from libsnakepp.preprocessor.preprocessor import Preprocessor


@final
class BoxedToken:
    """Token handle exposed to function macros.

    Holds token by value (tokens are immutable) and an reference to preprocessor which produced it.
    Handles are equal when they wrap equal tokens from the same preprocessor.
    """

    __slots__ = ("_preprocessor", "_token")

    def __init__(self, preprocessor: Preprocessor, token: Token) -> None:
        self._preprocessor = preprocessor
        self._token = token

    @property
    def kind(self) -> TokenType:
        return self._token.type

    @property
    def text(self) -> str:
        return self._token.text

    @property
    def value(self) -> object:
        return self._token.value

    @property
    def location(self) -> TokenLocation:
        return self._token.location

    @property
    def preprocessor(self) -> Preprocessor:
        return self._preprocessor

    @property
    def token(self) -> Token:
        return self._token

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoxedToken):
            return NotImplemented
        return self._preprocessor is other._preprocessor and self._token == other._token

    def __hash__(self) -> int:
        return hash((id(self._preprocessor), self._token))

    def __str__(self) -> str:
        return self._token.text

    def __repr__(self) -> str:
        return f"BoxedToken({self.kind.name}, {self.text!r}, at {self.location!r})"


def encode_token(preprocessor: Preprocessor, token: Token) -> BoxedToken:
    """Wrap token into an handle that may be passed to function macro."""
    return BoxedToken(preprocessor, token)


def decode_token(handle: object) -> Token:
    """Extract token from an handle or raise error if that is not an handle."""
    if not isinstance(handle, BoxedToken):
        raise TokenHandleTypeError(value=handle)
    return handle.token


def retokenize(preprocessor: Preprocessor, text: bytes) -> list[Token]:
    """Tokenize text returned by function macro, with lexer of the same preprocessor."""
    return preprocessor.tokenize(text)
