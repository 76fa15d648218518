import pytest

from libsnakepp.lexer.errors import UnclosedStringQuoteError
from libsnakepp.lexer.tokens import Token, TokenLocation, TokenType
from libsnakepp.preprocessor import Preprocessor
from libsnakepp.preprocessor.macros import BoxedToken, FunctionMacro, context
from libsnakepp.preprocessor.macros.exceptions import (
    FunctionMacroAllocationError,
    FunctionMacroCallError,
    FunctionMacroEncodingError,
    FunctionMacroInvalidBindingError,
    FunctionMacroResultTypeError,
    FunctionMacroTokenizationError,
)

INVOKED_AT = TokenLocation(line_number=4, col_number=8, source="scratch")


def _token(token_type: TokenType, text: str, col: int = 0) -> Token:
    return Token(
        type=token_type,
        text=text,
        value=text,
        location=TokenLocation(line_number=0, col_number=col, source="scratch"),
    )


def _bind(function: object, *, pass_context: bool = False) -> FunctionMacro:
    preprocessor = Preprocessor()
    return preprocessor.define("MACRO", function, pass_context=pass_context)  # type: ignore[return-value]


def test_function_macro_returning_nothing_expands_into_nothing() -> None:
    macro = _bind(lambda *_: None)
    assert macro.invoke(INVOKED_AT, []) == []
    assert macro.invoke(INVOKED_AT, [_token(TokenType.IDENTIFIER, "a")]) == []


def test_function_macro_receives_arguments_in_order() -> None:
    received: list[BoxedToken] = []

    def collect(*arguments: BoxedToken) -> None:
        received.extend(arguments)

    macro = _bind(collect)
    arguments = [
        _token(TokenType.IDENTIFIER, "a", col=0),
        _token(TokenType.PLUS, "+", col=2),
        _token(TokenType.IDENTIFIER, "b", col=4),
    ]
    macro.invoke(INVOKED_AT, arguments)

    assert [boxed.token for boxed in received] == arguments
    assert [boxed.kind for boxed in received] == [
        TokenType.IDENTIFIER,
        TokenType.PLUS,
        TokenType.IDENTIFIER,
    ]
    assert [boxed.location.col_number for boxed in received] == [0, 2, 4]
    assert all(boxed.preprocessor is macro.preprocessor for boxed in received)


def test_function_macro_arity_is_not_validated() -> None:
    macro = _bind(lambda a: a)
    with pytest.raises(FunctionMacroCallError) as excinfo:
        macro.invoke(INVOKED_AT, [])
    assert isinstance(excinfo.value.error, TypeError)


def test_function_macro_text_result_is_retokenized() -> None:
    macro = _bind(lambda: "1 + 2")
    tokens = macro.invoke(INVOKED_AT, [])
    assert [t.type for t in tokens] == [
        TokenType.INTEGER,
        TokenType.PLUS,
        TokenType.INTEGER,
    ]
    assert [t.text for t in tokens] == ["1", "+", "2"]


def test_function_macro_bytes_result_is_retokenized() -> None:
    macro = _bind(lambda: b"x * 2")
    assert [t.text for t in macro.invoke(INVOKED_AT, [])] == ["x", "*", "2"]


def test_function_macro_token_sequence_is_passed_through() -> None:
    x = _token(TokenType.STRING, '"not retokenized"')
    y = _token(TokenType.IDENTIFIER, "y")

    macro = _bind(lambda a, b: [b, a])
    assert macro.invoke(INVOKED_AT, [x, y]) == [y, x]

    macro = _bind(lambda *arguments: arguments)
    assert macro.invoke(INVOKED_AT, [x, y]) == [x, y]


def test_function_macro_integer_result_is_rejected() -> None:
    macro = _bind(lambda: 42)
    with pytest.raises(FunctionMacroResultTypeError) as excinfo:
        macro.invoke(INVOKED_AT, [])
    assert excinfo.value.kind == "TypeMismatch"
    assert excinfo.value.location == INVOKED_AT
    assert excinfo.value.index is None


def test_function_macro_partial_token_sequence_is_rejected() -> None:
    macro = _bind(lambda x: [x, 42])
    with pytest.raises(FunctionMacroResultTypeError) as excinfo:
        macro.invoke(INVOKED_AT, [_token(TokenType.IDENTIFIER, "x")])
    assert excinfo.value.index == 1


def test_function_macro_string_inside_token_sequence_is_rejected() -> None:
    macro = _bind(lambda: ["x"])
    with pytest.raises(FunctionMacroResultTypeError) as excinfo:
        macro.invoke(INVOKED_AT, [])
    assert excinfo.value.index == 0


def test_function_macro_invalid_utf8_is_rejected() -> None:
    macro = _bind(lambda: b"\xff\xfe")
    with pytest.raises(FunctionMacroEncodingError) as excinfo:
        macro.invoke(INVOKED_AT, [])
    assert excinfo.value.kind == "EncodingError"



def test_function_macro_untokenizable_text_is_attributed_to_invocation() -> None:
    macro = _bind(lambda: '"unclosed')
    with pytest.raises(FunctionMacroTokenizationError) as excinfo:
        macro.invoke(INVOKED_AT, [])

    error = excinfo.value
    assert error.kind == "TokenizationFailure"
    assert error.name == "MACRO"
    assert error.location == INVOKED_AT
    assert isinstance(error.error, UnclosedStringQuoteError)
    assert error.__cause__ is error.error


def test_function_macro_arguments_allocation_failure(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list[object] = []

    def exhausted(*_: object) -> BoxedToken:
        raise MemoryError

    monkeypatch.setattr(
        "libsnakepp.preprocessor.macros.invoker.encode_token",
        exhausted,
    )
    macro = _bind(lambda *arguments: calls.append(arguments))
    with pytest.raises(FunctionMacroAllocationError) as excinfo:
        macro.invoke(INVOKED_AT, [_token(TokenType.IDENTIFIER, "a")])

    error = excinfo.value
    assert error.kind == "AllocationFailure"
    assert error.name == "MACRO"
    assert error.location == INVOKED_AT
    assert isinstance(error.__cause__, MemoryError)
    assert calls == []

def test_function_macro_call_failure_carries_original_error() -> None:
    def failing() -> None:
        msg = "something went wrong"
        raise RuntimeError(msg)

    macro = _bind(failing)
    with pytest.raises(FunctionMacroCallError) as excinfo:
        macro.invoke(INVOKED_AT, [])

    error = excinfo.value
    assert error.kind == "ExternalCallFailure"
    assert isinstance(error.error, RuntimeError)
    assert error.__cause__ is error.error
    assert "something went wrong" in error.message


def test_function_macro_sees_invocation_location() -> None:
    seen: list[TokenLocation] = []

    def remember_location() -> None:
        seen.append(context.location)
        assert context.preprocessor is macro.preprocessor

    macro = _bind(remember_location)
    second_location = TokenLocation(line_number=10, col_number=0, source="scratch")

    macro.invoke(INVOKED_AT, [])
    macro.invoke(second_location, [])

    assert seen == [INVOKED_AT, second_location]


def test_function_macro_context_is_passed_as_argument() -> None:
    def name_and_line(ctx: context.InvocationContext, argument: BoxedToken) -> str:
        assert ctx.preprocessor is macro.preprocessor
        return f"{ctx.name} {ctx.location.line_number} {argument}"

    macro = _bind(name_and_line, pass_context=True)
    tokens = macro.invoke(INVOKED_AT, [_token(TokenType.IDENTIFIER, "arg")])
    assert [t.text for t in tokens] == ["MACRO", "4", "arg"]


def test_function_macro_requires_callable() -> None:
    with pytest.raises(FunctionMacroInvalidBindingError) as excinfo:
        FunctionMacro(
            location=TokenLocation.toolchain(),
            name="MACRO",
            preprocessor=Preprocessor(),
            function="not callable",  # type: ignore[arg-type]
        )
    assert excinfo.value.kind == "InvalidBinding"
