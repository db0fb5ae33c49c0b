from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class SourceError(RuntimeError):
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nhint: {self.hint}"
        return self.message


class StreamStateError(SourceError):
    """The character stream and the queries were driven out of order."""
