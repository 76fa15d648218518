from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable, Iterator
    from pathlib import Path

    from libsnakepp.lexer.tokens import Token, TokenLocation
    from libsnakepp.preprocessor.macros import MacrosRegistry
    from libsnakepp.preprocessor.preprocessor import Preprocessor


@dataclass(frozen=True, slots=True)
class TokenizerFrame:
    """Source of tokens that preprocessor currently reads from (file, include or macro expansion)."""

    tokens: Iterator[Token]

    # Name of an macro which expansion is being rescanned from that frame
    # That macro is not expanded again while frame is active
    expanded_macro: str | None = None

    # Path of an file (for file and include frames)
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ConditionalBlock:
    """Opened `#ifdef` / `#ifndef` block."""

    location: TokenLocation

    # Is block parent active (nested blocks within inactive ones are never active)
    parent_is_active: bool

    # Result of an condition for first branch
    condition: bool

    has_else: bool = False

    @property
    def is_active(self) -> bool:
        if not self.parent_is_active:
            return False
        return self.condition != self.has_else


@dataclass(frozen=False)
class PreprocessorState:
    """State for preprocessing which only required for internal usages."""

    preprocessor: Preprocessor

    tokenizers: deque[TokenizerFrame] = field(default_factory=deque)
    conditions: deque[ConditionalBlock] = field(default_factory=deque)

    @property
    def macros(self) -> MacrosRegistry:
        return self.preprocessor.macros

    @property
    def include_search_paths(self) -> list[Path]:
        return self.preprocessor.include_search_paths

    @property
    def user_include_search_paths(self) -> list[Path]:
        return self.preprocessor.user_include_search_paths

    @property
    def tokenizer(self) -> Generator[Token]:
        """Stream of tokens from top-most frame, exhausted frames are dropped."""
        while self.tokenizers:
            frame = self.tokenizers[-1]
            if (token := next(frame.tokens, None)) is None:
                self.tokenizers.pop()
                continue
            yield token

    @property
    def current_path(self) -> Path | None:
        """Path of an file that is currently being read (e.g to resolve relative includes)."""
        return next((f.path for f in reversed(self.tokenizers) if f.path), None)

    @property
    def include_depth(self) -> int:
        return sum(1 for f in self.tokenizers if f.path)

    @property
    def is_rescanning_expansion(self) -> bool:
        """Is last token was acquired from an macro expansion (e.g not from an file)."""
        return bool(self.tokenizers) and self.tokenizers[-1].expanded_macro is not None

    @property
    def is_active_block(self) -> bool:
        return not self.conditions or self.conditions[-1].is_active

    def is_macro_expanding(self, name: str) -> bool:
        return any(f.expanded_macro == name for f in self.tokenizers)

    def push_file(self, path: Path, tokens: Iterable[Token]) -> None:
        self.tokenizers.append(TokenizerFrame(tokens=iter(tokens), path=path))

    def push_expansion(self, name: str, tokens: Iterable[Token]) -> None:
        self.tokenizers.append(TokenizerFrame(tokens=iter(tokens), expanded_macro=name))

    def push_back(self, token: Token) -> None:
        """Return token that was read ahead, keeping frame it originates from."""
        expanded_macro = self.tokenizers[-1].expanded_macro if self.tokenizers else None
        self.tokenizers.append(
            TokenizerFrame(tokens=iter((token,)), expanded_macro=expanded_macro),
        )
