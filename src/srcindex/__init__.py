from __future__ import annotations

from .api import load_file, load_source
from .config import ContextWindow
from .errors import SourceError, StreamStateError
from .handler import EventRecorder, SourceHandler, TextRenderer
from .source import SourceCode
from .spans import Position

__all__ = [
    "ContextWindow",
    "EventRecorder",
    "Position",
    "SourceCode",
    "SourceError",
    "SourceHandler",
    "StreamStateError",
    "TextRenderer",
    "load_file",
    "load_source",
]
