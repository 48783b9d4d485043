"""Filesystem collaborator: listing, structural operations, archives."""

from .service import LISTING_FILTERS, DirectoryService, duplicate_name, entry_for_path, format_size
from .types import DirectoryEntry, DirectoryServiceError, FoundEntries, PartialOperationError

__all__ = [
    "DirectoryEntry",
    "DirectoryService",
    "DirectoryServiceError",
    "FoundEntries",
    "LISTING_FILTERS",
    "PartialOperationError",
    "duplicate_name",
    "entry_for_path",
    "format_size",
]
