from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from libsnakepp.exceptions import SnakeppError
from libsnakepp.preprocessor.exceptions import PreprocessorError

if TYPE_CHECKING:
    from libsnakepp.lexer.tokens import Token, TokenLocation

FunctionMacroErrorKind = Literal[
    "InvalidBinding",
    "ExternalCallFailure",
    "EncodingError",
    "TypeMismatch",
    "AllocationFailure",
    "TokenizationFailure",
]


class PreprocessorMacroRedefinesLanguageWordError(PreprocessorError):
    def __init__(self, location: TokenLocation, name: str) -> None:
        self.location = location
        self.name = name

    def __repr__(self) -> str:
        return f"""Macro '{self.name}' at {self.location} tries to redefine reserved preprocessor word!

{self.generic_error_name}"""


class PreprocessorMacroRedefinedError(PreprocessorError):
    def __init__(
        self,
        name: str,
        redefined: TokenLocation,
        original: TokenLocation,
    ) -> None:
        self.name = name
        self.redefined = redefined
        self.original = original

    def __repr__(self) -> str:
        return f"""Redefinition of an macro '{self.name}' at {self.redefined}

Original definition found at {self.original}.

Only single definition allowed for macros.
If it possible scenario of overriding, please un-define before redefinition.

{self.generic_error_name}"""


class PreprocessorMacroNonIdentifierNameError(PreprocessorError):
    def __init__(self, token: Token) -> None:
        self.token = token

    def __repr__(self) -> str:
        return f"""Non-identifier name for macro at {self.token.location}!

Macros should have name as 'identifier' but got '{self.token.type.name}'!

{self.generic_error_name}"""


class PreprocessorNoMacroNameError(PreprocessorError):
    def __init__(self, location: TokenLocation) -> None:
        self.location = location

    def __repr__(self) -> str:
        return f"""No macro name specified at {self.location}!

Do you have unfinished macro definition?

{self.generic_error_name}"""


class PreprocessorInvalidMacroNameError(PreprocessorError):
    def __init__(self, location: TokenLocation, name: str) -> None:
        self.location = location
        self.name = name

    def __repr__(self) -> str:
        return f"""Invalid macro name '{self.name}' at {self.location}!

Macro names must be identifiers (e.g `[A-Za-z_][A-Za-z0-9_]*`).

{self.generic_error_name}"""


class PreprocessorUndefineUnknownMacroError(PreprocessorError):
    def __init__(self, location: TokenLocation, name: str) -> None:
        self.location = location
        self.name = name

    def __repr__(self) -> str:
        return f"""Cannot undefine non-existing macro '{self.name}' at {self.location}!

Consider wrapping `#undef` with `#ifdef` if macro may be not defined.

{self.generic_error_name}"""


class PreprocessorUndefinePredefinedMacroError(PreprocessorError):
    def __init__(
        self,
        location: TokenLocation,
        name: str,
        original: TokenLocation,
    ) -> None:
        self.location = location
        self.name = name
        self.original = original

    def __repr__(self) -> str:
        return f"""Cannot undefine predefined macro '{self.name}' at {self.location}!

Macro was predefined at {self.original} and must stay defined.

{self.generic_error_name}"""


class FunctionMacroError(PreprocessorError):
    """Failure of an single function macro expansion.

    Carries macro name and location (of an invocation, or definition for binding errors),
    so it may be reported as diagnostic pointing at offending invocation.
    """

    kind: FunctionMacroErrorKind

    def __init__(self, name: str, location: TokenLocation) -> None:
        self.name = name
        self.location = location

    @property
    def message(self) -> str:
        return self.__repr__()


class FunctionMacroInvalidBindingError(FunctionMacroError):
    kind = "InvalidBinding"

    def __init__(self, name: str, location: TokenLocation, function: object) -> None:
        super().__init__(name, location)
        self.function = function

    def __repr__(self) -> str:
        return f"""Function macro '{self.name}' defined at {self.location} is bound to non-callable {type(self.function).__name__}!

Function macros must be bound to an callable (e.g function) which returns replacement for macro invocation.

{self.generic_error_name}"""


class FunctionMacroCallError(FunctionMacroError):
    kind = "ExternalCallFailure"

    def __init__(self, name: str, location: TokenLocation, error: Exception) -> None:
        super().__init__(name, location)
        self.error = error

    def __repr__(self) -> str:
        return f"""Function macro '{self.name}' invoked at {self.location} failed!

{type(self.error).__name__}: {self.error}

{self.generic_error_name}"""


class FunctionMacroEncodingError(FunctionMacroError):
    kind = "EncodingError"

    def __init__(self, name: str, location: TokenLocation, reason: str) -> None:
        super().__init__(name, location)
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Function macro '{self.name}' invoked at {self.location} returned text which is not valid UTF-8!

{self.reason}

{self.generic_error_name}"""


class FunctionMacroResultTypeError(FunctionMacroError):
    kind = "TypeMismatch"

    def __init__(
        self,
        name: str,
        location: TokenLocation,
        result: object,
        index: int | None = None,
    ) -> None:
        super().__init__(name, location)
        self.result = result

        # Index of an element within returned sequence which is not an token
        self.index = index

    def __repr__(self) -> str:
        got = type(self.result).__name__
        if self.index is not None:
            got = f"sequence with {got} at index {self.index}"
        return f"""Function macro '{self.name}' invoked at {self.location} returned {got}!

Function macros must return nothing, text, or a sequence of tokens.

{self.generic_error_name}"""


class FunctionMacroTokenizationError(FunctionMacroError):
    kind = "TokenizationFailure"

    def __init__(self, name: str, location: TokenLocation, error: SnakeppError) -> None:
        super().__init__(name, location)
        self.error = error

    def __repr__(self) -> str:
        return f"""Function macro '{self.name}' invoked at {self.location} returned text which cannot be tokenized!

{self.error!r}

{self.generic_error_name}"""


class FunctionMacroAllocationError(FunctionMacroError):
    kind = "AllocationFailure"

    def __repr__(self) -> str:
        return f"""Out of memory while constructing arguments for function macro '{self.name}' invoked at {self.location}!

{self.generic_error_name}"""


class TokenHandleTypeError(SnakeppError):
    kind: FunctionMacroErrorKind = "TypeMismatch"

    def __init__(self, value: object) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"""Expected token handle but got {type(self.value).__name__}!

Only tokens given to function macro (or created via `encode_token`) may be used as tokens.

{self.generic_error_name}"""


class InvocationContextUnboundError(SnakeppError):
    def __repr__(self) -> str:
        return f"""No function macro is being invoked right now!

Invocation context (`preprocessor`, `location`) is only available while function macro is being called.

{self.generic_error_name}"""
