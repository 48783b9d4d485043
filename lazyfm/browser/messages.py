"""Task requests issued by the browser and the messages they produce.

Requests are immutable values. A worker turns each request into exactly one
message; the event loop hands messages back to ``BrowserMachine.apply``.
Structural requests embed the refresh of the directory they change, so the
operation and the re-listing run in the same task.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..filesystem.types import DirectoryEntry
from ..preview.renderers import RenderedContent


@dataclass(frozen=True)
class RefreshListing:
    generation: int
    directory: Path
    show_hidden: bool
    listing_filter: str = "all"
    notice: str = ""


@dataclass(frozen=True)
class ComputeSize:
    generation: int
    index: int
    path: Path


@dataclass(frozen=True)
class RenameEntry:
    src: Path
    dst: Path
    relist: RefreshListing


@dataclass(frozen=True)
class MoveEntry:
    src: Path
    dst: Path
    remove_source: bool
    relist: RefreshListing


@dataclass(frozen=True)
class DuplicateEntry:
    path: Path
    relist: RefreshListing


@dataclass(frozen=True)
class DeleteEntry:
    path: Path
    relist: RefreshListing


@dataclass(frozen=True)
class CreateEntry:
    path: Path
    is_dir: bool
    relist: RefreshListing


@dataclass(frozen=True)
class ZipEntry:
    path: Path
    relist: RefreshListing


@dataclass(frozen=True)
class UnzipEntry:
    path: Path
    relist: RefreshListing


@dataclass(frozen=True)
class FindByName:
    generation: int
    query: str
    root: Path


@dataclass(frozen=True)
class ReadContent:
    generation: int
    path: Path
    width: int


@dataclass(frozen=True)
class PreviewDirectory:
    generation: int
    path: Path
    show_hidden: bool


@dataclass(frozen=True)
class CopyPath:
    path: Path


@dataclass(frozen=True)
class WriteSelection:
    selection_file: Path
    path: Path


StructuralRequest = Union[RenameEntry, MoveEntry, DuplicateEntry, DeleteEntry, CreateEntry, ZipEntry, UnzipEntry]

TaskRequest = Union[
    RefreshListing,
    ComputeSize,
    StructuralRequest,
    FindByName,
    ReadContent,
    PreviewDirectory,
    CopyPath,
    WriteSelection,
]


@dataclass(frozen=True)
class ListingLoaded:
    """Entries for ``directory``, or search results when ``found`` is set."""

    generation: int
    directory: Path
    entries: tuple[DirectoryEntry, ...]
    found: bool = False
    notice: str = ""


@dataclass(frozen=True)
class ListingFailed:
    generation: int
    description: str


@dataclass(frozen=True)
class SizeComputed:
    generation: int
    index: int
    path: Path
    label: str


@dataclass(frozen=True)
class ContentLoaded:
    generation: int
    path: Path
    content: RenderedContent


@dataclass(frozen=True)
class DirectoryPreviewLoaded:
    generation: int
    path: Path
    entries: tuple[DirectoryEntry, ...]


@dataclass(frozen=True)
class PreviewFailed:
    generation: int
    description: str


@dataclass(frozen=True)
class OperationFailed:
    """A structural or clipboard operation failed; ``refresh`` asks for a re-list."""

    description: str
    refresh: bool = False


@dataclass(frozen=True)
class Notice:
    text: str


@dataclass(frozen=True)
class SelectionWritten:
    path: Path


TaskMessage = Union[
    ListingLoaded,
    ListingFailed,
    SizeComputed,
    ContentLoaded,
    DirectoryPreviewLoaded,
    PreviewFailed,
    OperationFailed,
    Notice,
    SelectionWritten,
]


__all__ = [
    "ComputeSize",
    "ContentLoaded",
    "CopyPath",
    "CreateEntry",
    "DeleteEntry",
    "DirectoryPreviewLoaded",
    "DuplicateEntry",
    "FindByName",
    "ListingFailed",
    "ListingLoaded",
    "MoveEntry",
    "Notice",
    "OperationFailed",
    "PreviewDirectory",
    "PreviewFailed",
    "ReadContent",
    "RefreshListing",
    "RenameEntry",
    "SelectionWritten",
    "SizeComputed",
    "StructuralRequest",
    "TaskMessage",
    "TaskRequest",
    "UnzipEntry",
    "WriteSelection",
    "ZipEntry",
]
