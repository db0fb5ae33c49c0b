from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ContextWindow:
    """How much text surrounds a highlighted character or range, in slots.

    A line break counts as one slot. Changing these changes every rendered
    excerpt, so stored snapshots of excerpts depend on the defaults.
    """

    point_before: int = 15
    point_after: int = 6
    range_before: int = 10
    range_after: int = 6

    def __post_init__(self) -> None:
        for name in ("point_before", "point_after", "range_before", "range_after"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")


DEFAULT_WINDOW = ContextWindow()
