from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Generator, Iterable


ESCAPE_SYMBOL = "\\"
LINE_CONTINUATION = "\\"


def unescape_text_literal(string: str) -> str:
    """Remove all terminations within string/char (escape it)."""
    # Non latin-1 symbols are escaped first so `unicode-escape` does not garble them
    return string.encode("latin-1", "backslashreplace").decode("unicode-escape")


def find_word_start(text: str, start: int) -> int:
    """Find start column index of an word."""
    return _find_column(text, start, lambda s: not s.isspace())


def find_identifier_end(text: str, start: int) -> int:
    """Find end column index of an identifier (e.g `[A-Za-z0-9_]` sequence)."""
    return _find_column(text, start, lambda s: not is_identifier_symbol(s))


def is_identifier_start(symbol: str) -> bool:
    return symbol == "_" or (symbol.isascii() and symbol.isalpha())


def is_identifier_symbol(symbol: str) -> bool:
    return symbol == "_" or (symbol.isascii() and symbol.isalnum())


def find_quoted_literal_end(line: str, idx: int, *, quote: str) -> int:
    """Find index where given string ends (close quote) or -1 if not closed properly."""
    idx_end = len(line)

    escaped = False
    while idx < idx_end:
        current = line[idx]
        if current == quote and not escaped:
            return idx + 1

        escaped = current == ESCAPE_SYMBOL and not escaped
        idx += 1

    return -1


def join_continued_lines(lines: Iterable[str]) -> Generator[tuple[int, str]]:
    """Join physical lines ending with backslash into logical ones.

    :returns lines: Pairs of row where logical line begins and its text (without newline)
    """
    pending: list[str] = []
    pending_row = 0
    for row, line in enumerate(lines, start=0):
        line = line.rstrip("\r\n")  # noqa: PLW2901
        if not pending:
            pending_row = row

        if line.endswith(LINE_CONTINUATION):
            pending.append(line.removesuffix(LINE_CONTINUATION))
            continue

        pending.append(line)
        yield pending_row, "".join(pending)
        pending.clear()

    if pending:
        yield pending_row, "".join(pending)


def _find_column(text: str, start: int, predicate: Callable[[str], bool]) -> int:
    """Find index of an column by predicate. E.g `.index()` but with predicate."""
    end = len(text)
    while start < end and not predicate(text[start]):
        start += 1
    return start
