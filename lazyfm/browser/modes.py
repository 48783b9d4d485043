"""Interaction modes of the browser.

Exactly one mode is active at a time. Modes that act on an entry capture it
when they are entered and keep that snapshot (identified by path) until they
exit, so a later refresh cannot retarget them.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..filesystem.types import DirectoryEntry


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Renaming:
    target: DirectoryEntry


@dataclass(frozen=True)
class Moving:
    target: DirectoryEntry
    origin_dir: Path


@dataclass(frozen=True)
class DeleteConfirm:
    target: DirectoryEntry


@dataclass(frozen=True)
class CreatingFile:
    pass


@dataclass(frozen=True)
class CreatingDirectory:
    pass


@dataclass(frozen=True)
class Finding:
    pass


@dataclass(frozen=True)
class CommandBar:
    pass


Mode = Union[Idle, Renaming, Moving, DeleteConfirm, CreatingFile, CreatingDirectory, Finding, CommandBar]

IDLE = Idle()

TEXT_MODES = (Renaming, DeleteConfirm, CreatingFile, CreatingDirectory, Finding, CommandBar)

_PLACEHOLDERS: dict[type, str] = {
    Renaming: "Enter new name",
    DeleteConfirm: "Are you sure you want to delete this? (y/n)",
    CreatingFile: "Enter file name",
    CreatingDirectory: "Enter directory name",
    Finding: "Enter a search term",
    CommandBar: "Enter command",
}


def captures_text(mode: Mode) -> bool:
    """True when typed characters belong to the pending text buffer."""
    return isinstance(mode, TEXT_MODES)


def navigation_enabled(mode: Mode) -> bool:
    """Navigation keys work when idle and while picking a move destination."""
    return isinstance(mode, (Idle, Moving))


def prompt_placeholder(mode: Mode) -> str:
    return _PLACEHOLDERS.get(type(mode), "")


__all__ = [
    "CommandBar",
    "CreatingDirectory",
    "CreatingFile",
    "DeleteConfirm",
    "Finding",
    "IDLE",
    "Idle",
    "Mode",
    "Moving",
    "Renaming",
    "TEXT_MODES",
    "captures_text",
    "navigation_enabled",
    "prompt_placeholder",
]
