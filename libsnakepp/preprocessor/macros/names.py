from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .exceptions import (
    PreprocessorInvalidMacroNameError,
    PreprocessorMacroRedefinedError,
    PreprocessorMacroRedefinesLanguageWordError,
    PreprocessorUndefinePredefinedMacroError,
    PreprocessorUndefineUnknownMacroError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from libsnakepp.lexer.tokens import TokenLocation

    from .macro import FunctionMacro, Macro

# Macros name can only be an identifier, but this does not adds additional validation
# that set contains identifiers that considered as prohibited
PROHIBITED_MACRO_NAMES = frozenset(("defined", "__VA_ARGS__", "__VA_OPT__"))

_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def validate_macro_name(
    name: str,
    location: TokenLocation,
    macros: Mapping[str, Macro | FunctionMacro],
) -> None:
    """Ensure that macro with given name may be defined within given macros."""
    if not _IDENTIFIER_PATTERN.fullmatch(name):
        raise PreprocessorInvalidMacroNameError(location=location, name=name)

    if original := macros.get(name):
        raise PreprocessorMacroRedefinedError(
            name=name,
            redefined=location,
            original=original.location,
        )

    if name in PROHIBITED_MACRO_NAMES:
        raise PreprocessorMacroRedefinesLanguageWordError(
            location=location,
            name=name,
        )


def ensure_macro_may_be_undefined(
    name: str,
    location: TokenLocation,
    macros: Mapping[str, Macro | FunctionMacro],
) -> None:
    """Ensure that macro with given name is defined and is not an predefined one."""
    macro = macros.get(name)
    if macro is None:
        raise PreprocessorUndefineUnknownMacroError(location=location, name=name)

    if macro.predefined:
        raise PreprocessorUndefinePredefinedMacroError(
            location=location,
            name=name,
            original=macro.location,
        )
