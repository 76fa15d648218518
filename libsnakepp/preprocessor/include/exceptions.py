from collections.abc import Sequence
from pathlib import Path

from libsnakepp.lexer.tokens import TokenLocation
from libsnakepp.preprocessor.exceptions import PreprocessorError


class PreprocessorIncludeFileNotFoundError(PreprocessorError):
    def __init__(
        self,
        location: TokenLocation,
        target: str,
        searched: Sequence[Path],
    ) -> None:
        self.location = location
        self.target = target
        self.searched = searched

    def __repr__(self) -> str:
        searched = "\n".join(f"\t{path}" for path in self.searched) or "\t(nothing)"
        return f"""Unable to find file '{self.target}' included at {self.location}!

Searched in:
{searched}

Did you forgot to pass include directory with `-I`?

{self.generic_error_name}"""


class PreprocessorIncludeMalformedError(PreprocessorError):
    def __init__(self, location: TokenLocation) -> None:
        self.location = location

    def __repr__(self) -> str:
        return f"""Malformed `#include` at {self.location}!

Expected `#include "file"` or `#include <file>`.

{self.generic_error_name}"""


class PreprocessorIncludeDepthExceededError(PreprocessorError):
    def __init__(self, location: TokenLocation, depth: int) -> None:
        self.location = location
        self.depth = depth

    def __repr__(self) -> str:
        return f"""Include depth exceeded {self.depth} at {self.location}!

Most probably there is an recursive include without include guard (`#ifndef`).

{self.generic_error_name}"""
