"""Scrollable window over a list of rows with a fixed display height."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ViewportWindow:
    """Visible row range ``[offset, bottom]`` over ``total`` rows.

    The window never owns the row count; callers pass ``total`` so the same
    window works for the listing pane and the preview pane.
    """

    height: int
    offset: int = 0

    def __post_init__(self) -> None:
        self.height = max(1, self.height)
        self.offset = max(0, self.offset)

    @property
    def bottom(self) -> int:
        return self.offset + self.height - 1

    def max_offset(self, total: int) -> int:
        return max(0, total - self.height)

    def clamp(self, total: int) -> None:
        self.offset = max(0, min(self.offset, self.max_offset(total)))

    def line_up(self, n: int, total: int) -> None:
        self.offset -= n
        self.clamp(total)

    def line_down(self, n: int, total: int) -> None:
        self.offset += n
        self.clamp(total)

    def goto_top(self) -> None:
        self.offset = 0

    def goto_bottom(self, total: int) -> None:
        self.offset = self.max_offset(total)

    def reconcile(self, cursor: int, total: int) -> None:
        """Scroll the minimum distance that brings ``cursor`` back into view."""
        if cursor < self.offset:
            self.line_up(self.offset - cursor, total)
        elif cursor > self.bottom:
            self.line_down(cursor - self.bottom, total)

    def resize(self, height: int, cursor: int, total: int) -> None:
        self.height = max(1, height)
        self.clamp(total)
        self.reconcile(cursor, total)

    def visible_range(self, total: int) -> range:
        return range(self.offset, min(total, self.offset + self.height))


__all__ = ["ViewportWindow"]
