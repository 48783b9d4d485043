"""Domain datatypes for directory listings."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from pathlib import Path


class DirectoryServiceError(OSError):
    """Filesystem operation rejected before touching the disk."""


class PartialOperationError(DirectoryServiceError):
    """Multi-step operation that failed after some steps already ran.

    Raised for cross-device moves that copied the source but could not remove
    it afterwards. The duplicated state is left on disk.
    """


@dataclass(frozen=True)
class DirectoryEntry:
    """One file or directory row observed from the filesystem."""

    name: str
    path: Path
    is_dir: bool
    mode: int = 0
    size: int | None = None
    mtime: float = 0.0

    @property
    def extension(self) -> str:
        return "" if self.is_dir else self.path.suffix.lower()

    @property
    def is_symlink(self) -> bool:
        return stat.S_ISLNK(self.mode)

    @property
    def permissions(self) -> str:
        """``ls -l`` style permission text, e.g. ``drwxr-xr-x``."""
        if self.mode:
            return stat.filemode(self.mode)
        return "d---------" if self.is_dir else "----------"


@dataclass(frozen=True)
class FoundEntries:
    """Result of a name search: matched paths plus their entries, in walk order."""

    paths: tuple[Path, ...]
    entries: tuple[DirectoryEntry, ...]


__all__ = [
    "DirectoryEntry",
    "DirectoryServiceError",
    "FoundEntries",
    "PartialOperationError",
]
