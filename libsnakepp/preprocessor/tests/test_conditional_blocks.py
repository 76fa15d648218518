import pytest

from libsnakepp.preprocessor import Preprocessor
from libsnakepp.preprocessor.exceptions import (
    PreprocessorDuplicateElseError,
    PreprocessorUnmatchedConditionalDirectiveError,
    PreprocessorUnterminatedConditionalBlockError,
)
from libsnakepp.preprocessor.macros.exceptions import (
    PreprocessorMacroNonIdentifierNameError,
    PreprocessorNoMacroNameError,
)


def _preprocess(source: str, preprocessor: Preprocessor | None = None) -> list[str]:
    preprocessor = preprocessor or Preprocessor()
    return [t.text for t in preprocessor.preprocess_source(source)]


def test_ifdef() -> None:
    source = "#ifdef X\na\n#else\nb\n#endif"
    assert _preprocess(source) == ["b"]
    assert _preprocess("#define X\n" + source) == ["a"]


def test_ifndef() -> None:
    source = "#ifndef X\na\n#else\nb\n#endif"
    assert _preprocess(source) == ["a"]
    assert _preprocess("#define X\n" + source) == ["b"]


def test_nested_conditional_blocks() -> None:
    source = """
#define OUTER
#ifdef OUTER
  outer
  #ifdef INNER
    inner
  #else
    not_inner
  #endif
#else
  #ifndef INNER
    never
  #endif
#endif
"""
    assert _preprocess(source) == ["outer", "not_inner"]


def test_inactive_block_is_not_preprocessed() -> None:
    source = """
#ifdef MISSING
#define X 1
#undef UNKNOWN
#include "missing.h"
#ifdef "malformed"
#endif
#endif
X
"""
    assert _preprocess(source) == ["X"]


def test_inactive_block_does_not_invoke_function_macros() -> None:
    preprocessor = Preprocessor()
    calls: list[None] = []
    preprocessor.define("F", lambda: calls.append(None))
    assert _preprocess("#ifdef MISSING\nF()\n#endif", preprocessor) == []
    assert calls == []


def test_conditional_directive_trailing_tokens_are_ignored() -> None:
    assert _preprocess("#ifndef X garbage\na\n#endif X") == ["a"]


@pytest.mark.parametrize(
    ("source", "error"),
    [
        ("#endif", PreprocessorUnmatchedConditionalDirectiveError),
        ("#else", PreprocessorUnmatchedConditionalDirectiveError),
        ("#ifdef X\n#else\n#else\n#endif", PreprocessorDuplicateElseError),
        ("#ifdef X\na", PreprocessorUnterminatedConditionalBlockError),
        ("#ifdef\n#endif", PreprocessorNoMacroNameError),
        ("#ifndef 1\n#endif", PreprocessorMacroNonIdentifierNameError),
    ],
)
def test_malformed_conditional_blocks(source: str, error: type[Exception]) -> None:
    with pytest.raises(error):
        _preprocess(source)
