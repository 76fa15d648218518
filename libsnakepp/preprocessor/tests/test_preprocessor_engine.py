from pathlib import Path

import pytest

from libsnakepp.lexer.tokens import TokenLocation, TokenType
from libsnakepp.preprocessor import Preprocessor
from libsnakepp.preprocessor.exceptions import (
    PreprocessorUnterminatedMacroInvocationError,
)
from libsnakepp.preprocessor.macros import BoxedToken, FunctionMacro, Macro, context
from libsnakepp.preprocessor.macros.exceptions import (
    FunctionMacroCallError,
    FunctionMacroInvalidBindingError,
    FunctionMacroTokenizationError,
    PreprocessorInvalidMacroNameError,
    PreprocessorMacroRedefinedError,
    PreprocessorMacroNonIdentifierNameError,
    PreprocessorMacroRedefinesLanguageWordError,
    PreprocessorNoMacroNameError,
    PreprocessorUndefinePredefinedMacroError,
    PreprocessorUndefineUnknownMacroError,
)


def _preprocess(source: str, preprocessor: Preprocessor | None = None) -> list[str]:
    preprocessor = preprocessor or Preprocessor()
    return [t.text for t in preprocessor.preprocess_source(source)]


def test_preprocessor_passes_tokens_through() -> None:
    assert _preprocess("int main() { return 0; }") == [
        "int", "main", "(", ")", "{", "return", "0", ";", "}",
    ]  # fmt: skip


def test_preprocessor_drops_end_of_lines() -> None:
    tokens = list(Preprocessor().preprocess_source("a\nb\n\nc"))
    assert [t.text for t in tokens] == ["a", "b", "c"]
    assert all(t.type not in (TokenType.EOL, TokenType.EOF) for t in tokens)


def test_preprocessor_object_macro_expansion() -> None:
    source = "#define SIZE 1024\nbuffer[SIZE];"
    assert _preprocess(source) == ["buffer", "[", "1024", "]", ";"]


def test_preprocessor_empty_object_macro() -> None:
    assert _preprocess("#define EMPTY\na EMPTY b") == ["a", "b"]


def test_preprocessor_nested_object_macro_expansion() -> None:
    source = "#define A B + 1\n#define B 2\nA"
    assert _preprocess(source) == ["2", "+", "1"]


def test_preprocessor_self_referencing_macro_is_not_expanded_twice() -> None:
    assert _preprocess("#define X X + 1\nX") == ["X", "+", "1"]
    assert _preprocess("#define A B\n#define B A\nA B") == ["A", "B"]


def test_preprocessor_undefine() -> None:
    source = "#define X 1\nX\n#undef X\nX"
    assert _preprocess(source) == ["1", "X"]


def test_preprocessor_undefine_unknown() -> None:
    with pytest.raises(PreprocessorUndefineUnknownMacroError):
        _preprocess("#undef X")


def test_preprocessor_redefinition() -> None:
    with pytest.raises(PreprocessorMacroRedefinedError):
        _preprocess("#define X 1\n#define X 2")


@pytest.mark.parametrize(
    ("source", "error"),
    [
        ("#define", PreprocessorNoMacroNameError),
        ("#define defined 1", PreprocessorMacroRedefinesLanguageWordError),
        ('#define "X" 1', PreprocessorMacroNonIdentifierNameError),
    ],
)
def test_preprocessor_invalid_definitions(source: str, error: type[Exception]) -> None:
    with pytest.raises(error):
        _preprocess(source)


def test_preprocessor_directive_in_macro_expansion_is_not_executed() -> None:
    preprocessor = Preprocessor()
    preprocessor.define("DIRECTIVE", lambda: "#define")
    # Text forms an directive keyword when retokenized, but expansions are never executed
    assert _preprocess("DIRECTIVE() X", preprocessor) == ["#define", "X"]


def test_preprocessor_define_from_api() -> None:
    preprocessor = Preprocessor()
    macro = preprocessor.define("VERSION", "3")
    assert isinstance(macro, Macro)
    assert preprocessor.is_defined("VERSION")
    assert _preprocess("VERSION", preprocessor) == ["3"]

    preprocessor.define("FLAG")
    assert _preprocess("FLAG", preprocessor) == ["1"]

    preprocessor.undefine("VERSION")
    assert not preprocessor.is_defined("VERSION")
    with pytest.raises(PreprocessorUndefineUnknownMacroError):
        preprocessor.undefine("VERSION")


def test_preprocessor_predefined_macro_cannot_be_undefined() -> None:
    preprocessor = Preprocessor()
    preprocessor.define("__SNAKEPP__", predefined=True)
    preprocessor.define("__LINE_OF__", lambda: "0", predefined=True)

    with pytest.raises(PreprocessorUndefinePredefinedMacroError) as excinfo:
        preprocessor.undefine("__SNAKEPP__")
    assert excinfo.value.name == "__SNAKEPP__"

    with pytest.raises(PreprocessorUndefinePredefinedMacroError) as excinfo:
        _preprocess("\n#undef __LINE_OF__", preprocessor)
    assert excinfo.value.location.line_number == 1

    assert preprocessor.is_defined("__SNAKEPP__")
    assert preprocessor.is_defined("__LINE_OF__")
    assert _preprocess("__SNAKEPP__", preprocessor) == ["1"]


def test_preprocessor_define_validates_name() -> None:
    with pytest.raises(PreprocessorInvalidMacroNameError):
        Preprocessor().define("1X", "1")


def test_preprocessor_define_rejects_non_callable() -> None:
    with pytest.raises(FunctionMacroInvalidBindingError):
        Preprocessor().define("X", 42)  # type: ignore[arg-type]


def test_preprocessor_macros_survive_between_inputs() -> None:
    preprocessor = Preprocessor()
    assert _preprocess("#define X 1", preprocessor) == []
    assert _preprocess("X", preprocessor) == ["1"]


def test_function_macro_invocation_is_replaced() -> None:
    preprocessor = Preprocessor()
    macro = preprocessor.define("ADD", lambda a, b: f"{a} + {b}")
    assert isinstance(macro, FunctionMacro)

    assert _preprocess("x = ADD(1, 2);", preprocessor) == [
        "x", "=", "1", "+", "2", ";",
    ]  # fmt: skip


def test_function_macro_arguments_are_each_token() -> None:
    preprocessor = Preprocessor()
    received: list[list[str]] = []

    def collect(*arguments: BoxedToken) -> None:
        received.append([a.text for a in arguments])

    preprocessor.define("COLLECT", collect)
    _preprocess("COLLECT()", preprocessor)
    _preprocess("COLLECT(a, b + c)", preprocessor)
    _preprocess("COLLECT(f(x, y), z)", preprocessor)
    _preprocess("COLLECT(a,\n b)", preprocessor)

    assert received == [
        [],
        ["a", "b", "+", "c"],
        ["f", "(", "x", ",", "y", ")", "z"],
        ["a", "b"],
    ]


def test_function_macro_arguments_are_not_expanded() -> None:
    preprocessor = Preprocessor()
    received: list[str] = []

    def first(argument: BoxedToken, *_: BoxedToken) -> list[BoxedToken]:
        received.append(argument.text)
        return [argument]

    preprocessor.define("VALUE", "1")
    preprocessor.define("FIRST", first)

    # Argument is passed as-is, but result is rescanned
    assert _preprocess("FIRST(VALUE)", preprocessor) == ["1"]
    assert _preprocess("FIRST(VALUE, 2)", preprocessor) == ["1"]
    assert received == ["VALUE", "VALUE"]


def test_function_macro_without_arguments_is_not_invoked() -> None:
    preprocessor = Preprocessor()
    calls: list[None] = []
    preprocessor.define("F", lambda: calls.append(None))
    assert _preprocess("F + F", preprocessor) == ["F", "+", "F"]
    assert _preprocess("F", preprocessor) == ["F"]
    assert calls == []


def test_function_macro_result_is_rescanned() -> None:
    preprocessor = Preprocessor()
    preprocessor.define("ONE", "1")
    preprocessor.define("GET", lambda name: [name])
    assert _preprocess("GET(ONE)", preprocessor) == ["1"]


def test_function_macro_result_does_not_invoke_itself() -> None:
    preprocessor = Preprocessor()
    preprocessor.define("SELF", lambda: "SELF()")
    assert _preprocess("SELF()", preprocessor) == ["SELF", "(", ")"]


def test_function_macro_empty_result() -> None:
    preprocessor = Preprocessor()
    preprocessor.define("NOTHING", lambda *_: None)
    assert _preprocess("a NOTHING(b, c) d", preprocessor) == ["a", "d"]


def test_function_macro_sees_invocation_location() -> None:
    preprocessor = Preprocessor()
    locations: list[TokenLocation] = []

    def line() -> str:
        locations.append(context.location)
        return str(context.location.line_number + 1)

    preprocessor.define("LINE", line)
    tokens = _preprocess("\nLINE()\n  LINE()", preprocessor)

    assert tokens == ["2", "3"]
    assert [(loc.line_number, loc.col_number) for loc in locations] == [(1, 0), (2, 2)]
    assert all(loc.filepath == Path("<input>") for loc in locations)


def test_function_macro_failure_stops_preprocessing() -> None:
    preprocessor = Preprocessor()
    preprocessor.define("FAIL", lambda: 1 / 0)
    with pytest.raises(FunctionMacroCallError) as excinfo:
        _preprocess("a\nFAIL()", preprocessor)
    assert isinstance(excinfo.value.error, ZeroDivisionError)
    assert excinfo.value.location.line_number == 1


def test_function_macro_unterminated_invocation() -> None:
    preprocessor = Preprocessor()
    preprocessor.define("F", lambda *_: None)
    with pytest.raises(PreprocessorUnterminatedMacroInvocationError):
        _preprocess("F(a, (b)", preprocessor)


def test_function_macro_call_hook() -> None:
    calls: list[tuple[str, int]] = []
    preprocessor = Preprocessor(
        on_function_macro_call=lambda name, location: calls.append(
            (name, location.line_number),
        ),
    )
    preprocessor.define("F", lambda *_: None)
    _preprocess("F()\nF(1)\nF", preprocessor)
    assert calls == [("F", 0), ("F", 1)]


def test_preprocessor_tokenize_does_not_preprocess() -> None:
    preprocessor = Preprocessor()
    preprocessor.define("X", "1")
    tokens = preprocessor.tokenize(b"X\n+ 2")
    assert [t.text for t in tokens] == ["X", "+", "2"]


def test_function_macro_untokenizable_result_names_invocation() -> None:
    preprocessor = Preprocessor()
    preprocessor.define("F", lambda: '"unclosed')
    with pytest.raises(FunctionMacroTokenizationError) as excinfo:
        _preprocess("a\nb\nF()", preprocessor)

    assert excinfo.value.name == "F"
    assert excinfo.value.location.line_number == 2
    assert excinfo.value.location.filepath == Path("<input>")
    assert "'F'" in repr(excinfo.value)
    assert "<input>:3:1" in repr(excinfo.value)
