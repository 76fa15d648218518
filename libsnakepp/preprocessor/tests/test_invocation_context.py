import pytest

from libsnakepp.lexer.tokens import TokenLocation
from libsnakepp.preprocessor import Preprocessor
from libsnakepp.preprocessor.macros import (
    InvocationContext,
    context,
    current_invocation_context,
)
from libsnakepp.preprocessor.macros.context import bind_invocation_context
from libsnakepp.preprocessor.macros.exceptions import InvocationContextUnboundError


def test_context_is_unbound_outside_of_invocation() -> None:
    with pytest.raises(InvocationContextUnboundError):
        current_invocation_context()
    with pytest.raises(InvocationContextUnboundError):
        _ = context.location


def test_context_unknown_name() -> None:
    with pytest.raises(AttributeError):
        _ = context.unknown_binding


def test_context_is_restored_after_nested_binding() -> None:
    preprocessor = Preprocessor()
    outer = InvocationContext(
        preprocessor=preprocessor,
        location=TokenLocation(line_number=0, col_number=0, source="scratch"),
        name="OUTER",
    )
    inner = InvocationContext(
        preprocessor=preprocessor,
        location=TokenLocation(line_number=1, col_number=0, source="scratch"),
        name="INNER",
    )

    with bind_invocation_context(outer):
        assert context.location is outer.location
        with bind_invocation_context(inner):
            assert context.location is inner.location
            assert current_invocation_context().name == "INNER"
        assert context.location is outer.location
        assert context.preprocessor is preprocessor

    with pytest.raises(InvocationContextUnboundError):
        current_invocation_context()


def test_nested_function_macro_invocations_see_own_context() -> None:
    preprocessor = Preprocessor()
    seen: list[tuple[str, int]] = []

    def inner() -> str:
        seen.append(("INNER", context.location.line_number))
        return "1"

    def outer() -> str:
        expanded = [t.text for t in context.preprocessor.preprocess_source("\n\nINNER()")]
        seen.append(("OUTER", context.location.line_number))
        return " ".join(expanded)

    preprocessor.define("INNER", inner)
    preprocessor.define("OUTER", outer)

    tokens = list(preprocessor.preprocess_source("OUTER()"))
    assert [t.text for t in tokens] == ["1"]
    assert seen == [("INNER", 2), ("OUTER", 0)]
