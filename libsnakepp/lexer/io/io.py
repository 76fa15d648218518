from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


def open_source_file_line_stream(path: Path) -> Generator[str]:
    """Stream lines of an source file lazily (file is closed when stream is exhausted)."""
    with path.open(encoding="utf-8", errors="strict", newline="") as f:
        yield from f
