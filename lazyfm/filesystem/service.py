"""Synchronous filesystem operations backing the browser.

Every call is single-shot and side-effecting; failures raise ``OSError``
subclasses. The browser never calls these on its event loop, only from task
workers (see ``lazyfm.runtime.tasks``). No call here reads or changes the
process working directory: every path is passed in explicitly.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
import time
from pathlib import Path

from .archive import unzip_archive, zip_path
from .types import DirectoryEntry, DirectoryServiceError, FoundEntries, PartialOperationError

logger = logging.getLogger(__name__)

LISTING_FILTERS = ("all", "directories", "files")


def format_size(size: int) -> str:
    """Format a byte count with decimal units, e.g. ``512 B`` or ``4.2 kB``."""
    unit = 1000
    if size < unit:
        return f"{size} B"
    div, exp = unit, 0
    n = size // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit
    return f"{size / div:.1f} {'kMGTPE'[exp]}B"


def duplicate_name(name: str, timestamp: int) -> str:
    """Name for an in-place copy: ``notes.txt`` -> ``notes_<timestamp>.txt``."""
    candidate = Path(name)
    if candidate.suffix:
        return f"{candidate.stem}_{timestamp}{candidate.suffix}"
    return f"{name}_{timestamp}"


def entry_for_path(path: Path) -> DirectoryEntry:
    """Stat ``path`` (without following a final symlink) into an entry."""
    st = path.lstat()
    try:
        is_dir = path.is_dir()
    except OSError:
        is_dir = False
    return DirectoryEntry(
        name=path.name or str(path),
        path=path,
        is_dir=is_dir,
        mode=st.st_mode,
        size=None if is_dir else int(st.st_size),
        mtime=float(st.st_mtime),
    )


def _entry_from_scandir(child: os.DirEntry) -> DirectoryEntry:
    try:
        is_dir = child.is_dir()
    except OSError:
        is_dir = False
    mode = 0
    size: int | None = None
    mtime = 0.0
    try:
        st = child.stat(follow_symlinks=False)
        mode = st.st_mode
        mtime = float(st.st_mtime)
        if not is_dir:
            size = int(st.st_size)
    except OSError:
        pass
    return DirectoryEntry(
        name=child.name,
        path=Path(child.path),
        is_dir=is_dir,
        mode=mode,
        size=size,
        mtime=mtime,
    )


def _ensure_absent(path: Path) -> None:
    if path.exists() or path.is_symlink():
        raise DirectoryServiceError(errno.EEXIST, f"{path.name} already exists", str(path))


class DirectoryService:
    """Filesystem collaborator used by the browser's task layer."""

    def list(
        self,
        path: Path,
        show_hidden: bool,
        listing_filter: str = "all",
    ) -> tuple[DirectoryEntry, ...]:
        """List ``path`` in filesystem enumeration order.

        ``listing_filter`` keeps ``all`` entries, only ``directories`` or only
        ``files``. Hidden (dot-prefixed) names are dropped unless
        ``show_hidden`` is set.
        """
        if listing_filter not in LISTING_FILTERS:
            raise ValueError(f"unknown listing filter: {listing_filter!r}")
        entries: list[DirectoryEntry] = []
        with os.scandir(path) as children:
            for child in children:
                if not show_hidden and child.name.startswith("."):
                    continue
                entry = _entry_from_scandir(child)
                if listing_filter == "directories" and not entry.is_dir:
                    continue
                if listing_filter == "files" and entry.is_dir:
                    continue
                entries.append(entry)
        return tuple(entries)

    def rename(self, src: Path, dst: Path) -> None:
        _ensure_absent(dst)
        os.rename(src, dst)
        logger.info("renamed %s -> %s", src, dst)

    def move_or_copy(self, src: Path, dst: Path, remove_source: bool) -> None:
        """Move (``remove_source``) or copy ``src`` to ``dst``.

        A move first tries an atomic rename. Across filesystems it falls back
        to copy-then-delete; if the delete fails the copy is kept and
        ``PartialOperationError`` is raised.
        """
        if src.resolve() == dst.resolve():
            raise DirectoryServiceError(errno.EINVAL, f"{src.name} is already there", str(dst))
        _ensure_absent(dst)
        if remove_source:
            try:
                os.rename(src, dst)
                logger.info("moved %s -> %s", src, dst)
                return
            except OSError as exc:
                if exc.errno != errno.EXDEV:
                    raise
        self._copy(src, dst)
        if not remove_source:
            logger.info("copied %s -> %s", src, dst)
            return
        try:
            self.delete(src)
        except OSError as exc:
            raise PartialOperationError(
                exc.errno or errno.EIO,
                f"copied {src.name} but could not remove the original: {exc.strerror or exc}",
                str(src),
            ) from exc
        logger.info("moved %s -> %s across filesystems", src, dst)

    def duplicate(self, path: Path) -> Path:
        """Copy ``path`` next to itself under a timestamped name."""
        target = path.with_name(duplicate_name(path.name, int(time.time())))
        _ensure_absent(target)
        self._copy(path, target)
        logger.info("duplicated %s -> %s", path, target)
        return target

    def delete(self, path: Path) -> None:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            os.remove(path)
        logger.info("deleted %s", path)

    def create_file(self, path: Path) -> None:
        with open(path, "x", encoding="utf-8"):
            pass
        logger.info("created file %s", path)

    def create_directory(self, path: Path) -> None:
        path.mkdir(parents=True)
        logger.info("created directory %s", path)

    def zip(self, path: Path) -> Path:
        output = zip_path(path, int(time.time()))
        logger.info("zipped %s -> %s", path, output)
        return output

    def unzip(self, path: Path) -> Path:
        output = unzip_archive(path)
        logger.info("unzipped %s -> %s", path, output)
        return output

    def size_of(self, path: Path) -> int:
        """Return a file's size, or the total file bytes below a directory."""
        if not path.is_dir() or path.is_symlink():
            return int(path.lstat().st_size)

        def fail(exc: OSError) -> None:
            raise exc

        total = 0
        for directory, _dirnames, filenames in os.walk(path, onerror=fail):
            for filename in filenames:
                total += int(os.lstat(os.path.join(directory, filename)).st_size)
        return total

    def find_by_name(self, query: str, root: Path) -> FoundEntries:
        """Walk ``root`` collecting every entry whose name contains ``query``.

        Unreadable subdirectories are skipped rather than failing the search.
        """
        paths: list[Path] = []
        entries: list[DirectoryEntry] = []
        for directory, dirnames, filenames in os.walk(root):
            for name in (*dirnames, *filenames):
                if query not in name:
                    continue
                candidate = Path(directory) / name
                try:
                    entry = entry_for_path(candidate)
                except OSError:
                    continue
                paths.append(candidate)
                entries.append(entry)
        return FoundEntries(paths=tuple(paths), entries=tuple(entries))

    def write_selection(self, selection_file: Path, selected: Path) -> None:
        """Write the chosen path to ``selection_file`` for a calling shell."""
        selection_file.write_text(f"{selected}\n", encoding="utf-8")

    def _copy(self, src: Path, dst: Path) -> None:
        if src.is_dir() and not src.is_symlink():
            shutil.copytree(src, dst, symlinks=True)
        else:
            shutil.copy2(src, dst, follow_symlinks=False)


__all__ = [
    "DirectoryService",
    "LISTING_FILTERS",
    "duplicate_name",
    "entry_for_path",
    "format_size",
]
