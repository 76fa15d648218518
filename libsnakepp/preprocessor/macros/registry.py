from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from libsnakepp.lexer.lexer import tokenize_from_raw
from libsnakepp.lexer.tokens import TokenType

from .macro import FunctionMacro, Macro
from .names import validate_macro_name

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from libsnakepp.lexer.tokens import Token, TokenLocation
    from libsnakepp.preprocessor.preprocessor import Preprocessor


class MacrosRegistry(dict[str, Macro | FunctionMacro]):
    """Top-level preprocessor mapping of macros."""

    def new(self, location: TokenLocation, name: str) -> Macro:
        """Create empty macro that located at given location to fill it with preprocessed tokens."""
        macro = Macro(location=location, name=name)
        self.__setitem__(name, macro)
        return macro

    def new_from_raw(
        self,
        location: TokenLocation,
        name: str,
        definition: str,
        *,
        predefined: bool = False,
    ) -> Macro:
        """Create macro from given 'raw' definition (text, that need lexing)."""
        macro = Macro(
            location=location,
            name=name,
            tokens=_tokenize_raw_definition(location, definition),
            predefined=predefined,
        )
        self.__setitem__(name, macro)
        return macro

    def new_function(
        self,
        location: TokenLocation,
        name: str,
        *,
        preprocessor: Preprocessor,
        function: Callable[..., object],
        pass_context: bool = False,
        predefined: bool = False,
    ) -> FunctionMacro:
        """Bind given function as an macro which will be called on each invocation."""
        macro = FunctionMacro(
            location=location,
            name=name,
            preprocessor=preprocessor,
            function=function,
            pass_context=pass_context,
            predefined=predefined,
        )
        self.__setitem__(name, macro)
        return macro

    def copy(self) -> MacrosRegistry:
        return MacrosRegistry(super().copy())


def registry_from_raw_definitions(
    location: TokenLocation,
    definitions: Mapping[str, str],
) -> MacrosRegistry:
    """Construct new macros registry from given 'raw' definitions (text, that need lexing).

    Definition is implied to be single-line.
    Location must not be from an `file` source as in that scenario you must use different approaches like preprocessing another file.
    """
    if location.source == "file":
        msg = (
            f"`{registry_from_raw_definitions.__name__}` implies raw definitions, but tried to pass parent location with `file` source, which is consider as an fatal error.\n"
            "Consider using other ways to propagate macros (e.g via preprocessing that file and merging their registry, or pass location with proper source.)"
        )
        raise ValueError(msg)

    registry = MacrosRegistry()
    for name, definition in definitions.items():
        validate_macro_name(name, location, registry)
        registry.new_from_raw(location, name, definition)
    return registry


def _tokenize_raw_definition(location: TokenLocation, definition: str) -> deque[Token]:
    # Tokenize definition with propagated source
    # (as definition is not from an file, locations within it are not meaningful)
    source = "toolchain" if location.source == "file" else location.source
    tokenizer = tokenize_from_raw(source=source, lines=[definition])
    return deque(t for t in tokenizer if t.type not in (TokenType.EOL, TokenType.EOF))
