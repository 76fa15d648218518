from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from libsnakepp.lexer.keywords import PreprocessorKeyword
from libsnakepp.lexer.tokens import Token, TokenLocation, TokenType
from libsnakepp.preprocessor.exceptions import (
    PreprocessorUnterminatedMacroInvocationError,
)

from .exceptions import (
    PreprocessorMacroNonIdentifierNameError,
    PreprocessorNoMacroNameError,
)
from .macro import FunctionMacro, Macro
from .names import ensure_macro_may_be_undefined, validate_macro_name

if TYPE_CHECKING:
    from libsnakepp.preprocessor._state import PreprocessorState


def consume_macro_definition_from_token(
    token: Token,
    state: PreprocessorState,
) -> Macro:
    """Consume macro definition block tokens into preprocessed macro container with validation."""
    assert token.type == TokenType.KEYWORD
    assert token.value == PreprocessorKeyword.DEFINE
    name = _consume_macro_name(token.location, state)

    macro = state.macros.new(token.location, name)
    _consume_macro_definition(macro, state)

    return macro


def consume_macro_undefine_from_token(token: Token, state: PreprocessorState) -> None:
    assert token.type == TokenType.KEYWORD
    assert token.value == PreprocessorKeyword.UNDEFINE

    name_token = next(state.tokenizer, None)
    if not name_token or name_token.type == TokenType.EOL:
        raise PreprocessorNoMacroNameError(location=token.location)

    if name_token.type != TokenType.IDENTIFIER:
        raise PreprocessorMacroNonIdentifierNameError(token=name_token)

    name = name_token.text
    ensure_macro_may_be_undefined(name, name_token.location, state.macros)
    state.macros.pop(name)


def try_resolve_and_expand_macro_reference_from_token(
    token: Token,
    state: PreprocessorState,
) -> bool:
    """Try to search for defined macro and resolve it with expansion if possible.

    Expansion is pushed into state to be rescanned, so macros inside expansions are expanded too.
    Macro is not expanded within its own expansion (e.g `#define X X` expands into `X`).
    """
    assert token.type == TokenType.IDENTIFIER
    assert isinstance(token.value, str)

    name = token.value
    if not (macro := state.macros.get(name)):
        # Macro definition does not exists - do not expand
        return False

    if state.is_macro_expanding(name):
        return False

    match macro:
        case FunctionMacro():
            return _try_expand_function_macro(macro, token, state)
        case Macro():
            state.push_expansion(name, macro.tokens)
            return True
        case _:
            assert_never(macro)


def _try_expand_function_macro(
    macro: FunctionMacro,
    token: Token,
    state: PreprocessorState,
) -> bool:
    """Expand function macro invocation, only if its name is followed by arguments `(...)`."""
    lookahead = next(state.tokenizer, None)
    if lookahead is None:
        return False
    if lookahead.type != TokenType.LPAREN:
        state.push_back(lookahead)
        return False

    arguments = _consume_function_macro_arguments(macro.name, token.location, state)
    if on_call := state.preprocessor.on_function_macro_call:
        on_call(macro.name, token.location)

    state.push_expansion(macro.name, macro.invoke(token.location, arguments))
    return True


def _consume_function_macro_arguments(
    name: str,
    location: TokenLocation,
    state: PreprocessorState,
) -> list[Token]:
    """Consume tokens until matching close parenthesis into arguments.

    Each token is an separate argument, top-level commas only separates them.
    """
    arguments: list[Token] = []
    depth = 0
    while token := next(state.tokenizer, None):
        match token.type:
            case TokenType.EOF:
                break
            case TokenType.EOL:
                continue
            case TokenType.COMMA if depth == 0:
                continue
            case TokenType.LPAREN:
                depth += 1
            case TokenType.RPAREN if depth == 0:
                return arguments
            case TokenType.RPAREN:
                depth -= 1
        arguments.append(token)

    raise PreprocessorUnterminatedMacroInvocationError(name=name, location=location)


def _consume_macro_name(location: TokenLocation, state: PreprocessorState) -> str:
    """Consume and validate macro name from beginning of an macro definition."""
    token = next(state.tokenizer, None)
    if not token or token.type == TokenType.EOL:
        raise PreprocessorNoMacroNameError(location=location)

    if token.type != TokenType.IDENTIFIER:
        raise PreprocessorMacroNonIdentifierNameError(token=token)

    name = token.text
    validate_macro_name(name, token.location, state.macros)
    return name


def _consume_macro_definition(
    macro: Macro,
    state: PreprocessorState,
) -> None:
    """Consume current tokenizer state into macro block container tokens."""
    while token := next(state.tokenizer, None):
        if token.type in (TokenType.EOL, TokenType.EOF):
            # Macro definition is line-dependant so it consumes until first end-of-line (EOL)
            break

        # Directives are never lexed within definition, as they are only recognized at line start
        macro.tokens.append(token)
