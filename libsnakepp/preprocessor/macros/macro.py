from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from libsnakepp.lexer.tokens import Token

from .exceptions import FunctionMacroInvalidBindingError
from .invoker import invoke_function_macro

if TYPE_CHECKING:
    from collections.abc import Callable, MutableSequence, Sequence

    from libsnakepp.lexer.tokens import TokenLocation
    from libsnakepp.preprocessor.preprocessor import Preprocessor


@dataclass(frozen=True)
class Macro:
    """Preprocessor macro definition for text substitution and conditional compilation.

    Macros are named containers of sequence of tokens (e.g raw text) to be expanded
    when the macro name invocation is encountered during preprocessing.

    They also used in preprocessor conditional blocks (e.g `#ifdef`, `#ifndef`)

    Language workflow:
        Preprocessor encounter macro definition like:
        `#define VALUE 1024`

        It consumes that whole block until `EOL` (end-of-line) token (macro definitions are line-dependant)
        Next time when preprocessor encounter an name of that token in tokens, e.g:
        `{code} VALUE {code}`
        It will consume that invocation and expand that tokens which that macro contains, e.g:
        `{code} 1024 {code}`

    Command-Line-Interface (CLI) definitions:
        Definitions (macros) may be propagated from the CLI via `-D` flag, e.g: `-DMACRO_NAME` or `-DMACRO_NAME=128`
        They will be treated as same as file-contained definitions would be.
    """

    # Where is that definitions begins (an reference to `#define` token)
    # There is possibility that definition is comes from CLI or toolchain
    location: TokenLocation

    # Definition block name
    name: str

    # Actual macro container, contains tokens which that macro would expand into
    tokens: MutableSequence[Token] = field(default_factory=deque[Token])

    # Predefined macros cannot be undefined (e.g toolchain ones)
    predefined: bool = False


@dataclass(frozen=True)
class FunctionMacro:
    """Macro which expansion is computed by calling an Python callable.

    Invocation `NAME(a, b + c)` calls function with each argument token as boxed token
    (`a`, `b`, `+`, `c` here, separating commas are dropped) and replaces invocation with
    whatever function returns:
        - `None` expands into nothing
        - text (`str` / UTF-8 `bytes`) is tokenized by the same preprocessor
        - sequence of tokens (boxed ones, as received within arguments) is used as-is

    Binding keeps both function and preprocessor it was defined against until it is undefined.
    """

    location: TokenLocation
    name: str

    preprocessor: Preprocessor = field(repr=False)
    function: Callable[..., object] = field(repr=False)

    # Pass `InvocationContext` as first positional argument,
    # instead of reading it from `libsnakepp.preprocessor.macros.context`
    pass_context: bool = False

    predefined: bool = False

    def __post_init__(self) -> None:
        if self.preprocessor is None or not callable(self.function):
            raise FunctionMacroInvalidBindingError(
                name=self.name,
                location=self.location,
                function=self.function,
            )

    def invoke(
        self,
        expansion_location: TokenLocation,
        arguments: Sequence[Token],
    ) -> list[Token]:
        """Expand macro invocation located at given location into replacement tokens."""
        return invoke_function_macro(self, expansion_location, arguments)

    __call__ = invoke
