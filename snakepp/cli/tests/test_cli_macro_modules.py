from pathlib import Path

import pytest

from libsnakepp.preprocessor import Preprocessor
from libsnakepp.preprocessor.macros.exceptions import PreprocessorMacroRedefinedError
from snakepp.cli.errors.macro_modules import MacroModuleLoadError, MacroModuleNoEntryError
from snakepp.cli.macro_modules import load_macro_modules

MACRO_MODULE = """
from libsnakepp.preprocessor.macros import context


def stringify(*arguments):
    return '"' + " ".join(a.text for a in arguments) + '"'


def line():
    return str(context.location.line_number + 1)


def define_macros(preprocessor):
    preprocessor.define("STRINGIFY", stringify)
    preprocessor.define("LINE", line)
"""


def test_load_macro_module(tmp_path: Path) -> None:
    module = tmp_path / "macros.py"
    module.write_text(MACRO_MODULE)

    preprocessor = Preprocessor()
    load_macro_modules(preprocessor, [module])
    assert preprocessor.is_defined("STRINGIFY")
    assert preprocessor.is_defined("LINE")

    tokens = list(preprocessor.preprocess_source("STRINGIFY(a + b)\nLINE()"))
    assert [t.value for t in tokens] == ["a + b", 2]


def test_load_macro_module_without_entry(tmp_path: Path) -> None:
    module = tmp_path / "empty.py"
    module.write_text("define_macros = 42\n")

    with pytest.raises(MacroModuleNoEntryError):
        load_macro_modules(Preprocessor(), [module])


@pytest.mark.parametrize(
    "source",
    [
        "raise RuntimeError('broken')\n",
        "def define_macros(preprocessor):\n    raise RuntimeError('broken')\n",
        "def define_macros(:\n",
    ],
)
def test_load_macro_module_failure(tmp_path: Path, source: str) -> None:
    module = tmp_path / "broken.py"
    module.write_text(source)

    with pytest.raises(MacroModuleLoadError):
        load_macro_modules(Preprocessor(), [module])


def test_load_macro_module_preprocessor_errors_are_not_wrapped(tmp_path: Path) -> None:
    module = tmp_path / "twice.py"
    module.write_text(
        "def define_macros(preprocessor):\n"
        "    preprocessor.define('X', '1')\n"
        "    preprocessor.define('X', '2')\n",
    )

    with pytest.raises(PreprocessorMacroRedefinedError):
        load_macro_modules(Preprocessor(), [module])
