"""Zip archive creation and extraction for browser entries."""

from __future__ import annotations

import errno
import os
import zipfile
from pathlib import Path

from .types import DirectoryServiceError


def zip_path(path: Path, timestamp: int) -> Path:
    """Compress a file or directory tree into ``<name>_<timestamp>.zip`` beside it.

    Member names are stored relative to the parent directory, so extracting
    the archive recreates ``<name>/...``.
    """
    output = path.with_name(f"{path.name}_{timestamp}.zip")
    if output.exists():
        raise DirectoryServiceError(errno.EEXIST, f"{output.name} already exists", str(output))
    base = path.parent
    with zipfile.ZipFile(output, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        if not path.is_dir():
            archive.write(path, arcname=path.name)
            return output
        for directory, _dirnames, filenames in os.walk(path):
            for filename in sorted(filenames):
                member = Path(directory) / filename
                archive.write(member, arcname=str(member.relative_to(base)))
    return output


def unzip_target(path: Path) -> Path:
    """Extraction directory for ``path``: its name up to the first dot."""
    stem = path.name.split(".", 1)[0] or path.stem
    return path.with_name(stem)


def unzip_archive(path: Path) -> Path:
    """Extract ``path`` into :func:`unzip_target`, refusing members that escape it."""
    output = unzip_target(path)
    root = output.resolve()
    try:
        archive = zipfile.ZipFile(path)
    except zipfile.BadZipFile as exc:
        raise DirectoryServiceError(errno.EINVAL, f"{path.name} is not a zip archive", str(path)) from exc
    with archive:
        for member in archive.infolist():
            destination = (output / member.filename).resolve()
            if destination != root and not destination.is_relative_to(root):
                raise DirectoryServiceError(
                    errno.EPERM,
                    f"{member.filename}: illegal file path",
                    str(path),
                )
        output.mkdir(parents=True, exist_ok=True)
        archive.extractall(output)
    return output


__all__ = ["unzip_archive", "unzip_target", "zip_path"]
