"""Invocation context of an function macro which is being called.

Function macro may read preprocessor and location of its invocation by name while being called:
```
from libsnakepp.preprocessor.macros import context

def LINE():
    return str(context.location.line_number + 1)
```
Context is replaced by each invocation and restored after it, so nested invocations
(e.g function macro preprocessing text which invokes another one) see their own context.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .exceptions import InvocationContextUnboundError

if TYPE_CHECKING:
    from collections.abc import Generator

    from libsnakepp.lexer.tokens import TokenLocation
    from libsnakepp.preprocessor.preprocessor import Preprocessor


@dataclass(frozen=True, slots=True)
class InvocationContext:
    """Preprocessor and location of an function macro invocation."""

    preprocessor: Preprocessor
    location: TokenLocation

    # Name of the macro being invoked
    name: str


_invocation_context: ContextVar[InvocationContext] = ContextVar(
    "function_macro_invocation_context",
)

# Names readable from that module while function macro is being called
CONTEXT_BINDINGS = ("preprocessor", "location")


@contextmanager
def bind_invocation_context(
    context: InvocationContext,
) -> Generator[InvocationContext]:
    """Publish given context for the duration of an function macro call."""
    token = _invocation_context.set(context)
    try:
        yield context
    finally:
        _invocation_context.reset(token)


def current_invocation_context() -> InvocationContext:
    """Get context of function macro which is being called right now or raise error if there is none."""
    try:
        return _invocation_context.get()
    except LookupError:
        raise InvocationContextUnboundError from None


def __getattr__(name: str) -> object:
    if name in CONTEXT_BINDINGS:
        return getattr(current_invocation_context(), name)
    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
