"""Cursor and windowing state over the current directory listing."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..filesystem.types import DirectoryEntry
from .viewport import ViewportWindow


class ListingState:
    """Ordered entries, the selected index, and the visible window.

    Invariants: when entries exist ``0 <= cursor < len(entries)``; when empty
    ``cursor == 0``. After every cursor change the viewport satisfies
    ``offset <= cursor <= bottom``.
    """

    def __init__(self, height: int = 1) -> None:
        self.entries: tuple[DirectoryEntry, ...] = ()
        self.sizes: list[str | None] = []
        self.sizes_requested: set[int] = set()
        self.cursor = 0
        self.viewport = ViewportWindow(height=height)

    def __len__(self) -> int:
        return len(self.entries)

    def set_listing(self, entries: Iterable[DirectoryEntry]) -> None:
        """Replace all entries; cursor and viewport go back to the top."""
        self.entries = tuple(entries)
        self.sizes = [None] * len(self.entries)
        self.sizes_requested = set()
        self.cursor = 0
        self.viewport.goto_top()

    def claim_visible_sizes(self) -> list[int]:
        """Visible rows whose size was never requested; they are marked as requested."""
        claimed = [idx for idx in self.viewport.visible_range(len(self.entries)) if idx not in self.sizes_requested]
        self.sizes_requested.update(claimed)
        return claimed

    def forget_pending_sizes(self) -> None:
        self.sizes_requested = {idx for idx, label in enumerate(self.sizes) if label is not None}

    def selected(self) -> DirectoryEntry | None:
        if not self.entries:
            return None
        return self.entries[self.cursor]

    def index_of(self, path: Path) -> int | None:
        for idx, entry in enumerate(self.entries):
            if entry.path == path:
                return idx
        return None

    def move_down(self) -> None:
        """Select the next row, wrapping from the last row to the first."""
        if not self.entries:
            return
        if self.cursor >= len(self.entries) - 1:
            self.goto_top()
            return
        self.cursor += 1
        self.viewport.reconcile(self.cursor, len(self.entries))

    def move_up(self) -> None:
        """Select the previous row, wrapping from the first row to the last."""
        if not self.entries:
            return
        if self.cursor <= 0:
            self.goto_bottom()
            return
        self.cursor -= 1
        self.viewport.reconcile(self.cursor, len(self.entries))

    def goto_top(self) -> None:
        self.cursor = 0
        self.viewport.goto_top()

    def goto_bottom(self) -> None:
        self.cursor = max(0, len(self.entries) - 1)
        self.viewport.goto_bottom(len(self.entries))

    def resize(self, height: int) -> None:
        self.viewport.resize(height, self.cursor, len(self.entries))

    def apply_size(self, index: int, path: Path, label: str) -> bool:
        """Backfill one size label; ignored when ``index`` no longer names ``path``."""
        if not 0 <= index < len(self.entries):
            return False
        if self.entries[index].path != path:
            return False
        self.sizes[index] = label
        return True


__all__ = ["ListingState"]
