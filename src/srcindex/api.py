from __future__ import annotations

from pathlib import Path

from .config import DEFAULT_WINDOW, ContextWindow
from .source import SourceCode


FILE_CHUNK_SIZE = 64 * 1024


def load_source(
    text: str,
    *,
    chunk_size: int | None = None,
    window: ContextWindow = DEFAULT_WINDOW,
) -> SourceCode:
    """Index `text` and return the finished SourceCode.

    With `chunk_size` the text is fed in slices of that size, the way a
    streaming parser would deliver it.
    """
    if chunk_size is not None and chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    src = SourceCode(window=window)
    src.start()
    if chunk_size is None:
        src.characters(text)
    else:
        for i in range(0, len(text), chunk_size):
            src.characters(text[i : i + chunk_size])
    src.end()
    return src


def load_file(
    path: str | Path,
    *,
    chunk_size: int = FILE_CHUNK_SIZE,
    window: ContextWindow = DEFAULT_WINDOW,
) -> SourceCode:
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    p = Path(path).expanduser().resolve()
    src = SourceCode(window=window)
    src.start()
    # newline="" keeps CR and CRLF as they are in the file
    with p.open(encoding="utf-8", newline="") as f:
        for chunk in iter(lambda: f.read(chunk_size), ""):
            src.characters(chunk)
    src.end()
    return src
