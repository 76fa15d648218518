from pathlib import Path

from libsnakepp.exceptions import SnakeppError


class MacroModuleLoadError(SnakeppError):
    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error

    def __repr__(self) -> str:
        return f"""Unable to load macro module '{self.path}'!

{type(self.error).__name__}: {self.error}

{self.generic_error_name}"""


class MacroModuleNoEntryError(SnakeppError):
    def __init__(self, path: Path, entry: str) -> None:
        self.path = path
        self.entry = entry

    def __repr__(self) -> str:
        return f"""Macro module '{self.path}' has no `{self.entry}` function!

Macro modules must define function macros within `def {self.entry}(preprocessor): ...`, e.g:
    def {self.entry}(preprocessor):
        preprocessor.define("ANSWER", lambda: "42")

{self.generic_error_name}"""
