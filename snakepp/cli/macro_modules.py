"""Python files which define function macros for preprocessor (passed via `-M`)."""

from __future__ import annotations

import importlib.util
import sys
from typing import TYPE_CHECKING

from libsnakepp.exceptions import SnakeppError
from snakepp.cli.errors.macro_modules import (
    MacroModuleLoadError,
    MacroModuleNoEntryError,
)

if TYPE_CHECKING:
    from pathlib import Path
    from types import ModuleType

    from libsnakepp.preprocessor import Preprocessor

MACRO_MODULE_ENTRY = "define_macros"


def load_macro_modules(preprocessor: Preprocessor, paths: list[Path]) -> None:
    """Load each macro module in order and let it define its macros within preprocessor."""
    for path in paths:
        module = _import_module_from_file(path)
        entry = getattr(module, MACRO_MODULE_ENTRY, None)
        if not callable(entry):
            raise MacroModuleNoEntryError(path=path, entry=MACRO_MODULE_ENTRY)

        try:
            entry(preprocessor)
        except SnakeppError:
            raise
        except Exception as e:  # noqa: BLE001
            raise MacroModuleLoadError(path=path, error=e) from e


def _import_module_from_file(path: Path) -> ModuleType:
    """Import an Python module from an file path (it is registered as `snakepp_macros_{stem}`)."""
    module_name = f"snakepp_macros_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise MacroModuleLoadError(
            path=path,
            error=ImportError(f"Cannot load module from {path}"),
        )

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:  # noqa: BLE001
        sys.modules.pop(module_name, None)
        raise MacroModuleLoadError(path=path, error=e) from e
    return module
