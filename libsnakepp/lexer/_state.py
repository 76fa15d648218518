from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from .tokens import TokenLocation

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=False)
class LexerState:
    """State for lexical analysis which only required for internal usages."""

    path: Path | Literal["cli", "toolchain", "scratch"]

    _row: int = 0
    col: int = 0

    _line: str = ""

    # Set when `/*` comment is not closed on its own line
    block_comment_opened_at: TokenLocation | None = None

    # Set when line has no tokens yet (directives are only allowed at line start)
    at_line_start: bool = True

    def current_location(self) -> TokenLocation:
        if self.path == "cli":
            return TokenLocation.cli()
        if self.path == "toolchain":
            return TokenLocation.toolchain()
        if self.path == "scratch":
            return TokenLocation(
                line_number=self.row,
                col_number=self.col,
                source="scratch",
            )

        return TokenLocation(
            filepath=self.path,
            line_number=self.row,
            col_number=self.col,
        )

    @property
    def row(self) -> int:
        return self._row

    @property
    def line(self) -> str:
        return self._line

    def set_line(self, row: int, line: str) -> None:
        self._row = row
        self._line = line
        self.col = 0
        self.at_line_start = True

    def has_trailing_whitespace(self) -> bool:
        """Is cursor at whitespace or at the end of line (e.g token that was just consumed is followed by whitespace)."""
        return self.col >= len(self.line) or self.line[self.col].isspace()
