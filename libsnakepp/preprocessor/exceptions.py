from libsnakepp.exceptions import SnakeppError
from libsnakepp.lexer.keywords import KEYWORD_TO_NAME, PreprocessorKeyword
from libsnakepp.lexer.tokens import TokenLocation


class PreprocessorError(SnakeppError):
    """Parent for all errors raised while preprocessing."""


class PreprocessorUnterminatedMacroInvocationError(PreprocessorError):
    def __init__(self, name: str, location: TokenLocation) -> None:
        self.name = name
        self.location = location

    def __repr__(self) -> str:
        return f"""Unterminated invocation of function macro '{self.name}' at {self.location}!

Reached end of input while collecting macro arguments, expected closing `)`.

{self.generic_error_name}"""


class PreprocessorUnmatchedConditionalDirectiveError(PreprocessorError):
    def __init__(self, keyword: PreprocessorKeyword, location: TokenLocation) -> None:
        self.keyword = keyword
        self.location = location

    def __repr__(self) -> str:
        return f"""Unmatched `{KEYWORD_TO_NAME[self.keyword]}` at {self.location}!

There is no opened `#ifdef` / `#ifndef` block to apply it to.

{self.generic_error_name}"""


class PreprocessorDuplicateElseError(PreprocessorError):
    def __init__(self, location: TokenLocation, block_location: TokenLocation) -> None:
        self.location = location
        self.block_location = block_location

    def __repr__(self) -> str:
        return f"""Duplicate `#else` at {self.location}!

Conditional block opened at {self.block_location} already has an `#else` branch.

{self.generic_error_name}"""


class PreprocessorUnterminatedConditionalBlockError(PreprocessorError):
    def __init__(self, block_location: TokenLocation) -> None:
        self.block_location = block_location

    def __repr__(self) -> str:
        return f"""Unterminated conditional block opened at {self.block_location}!

Every `#ifdef` / `#ifndef` must be closed with `#endif`.

{self.generic_error_name}"""
