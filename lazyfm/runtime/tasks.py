"""Run browser task requests off the event loop.

``execute_request`` performs one request synchronously and always returns a
single message; collaborator exceptions are converted here and nowhere else.
``TaskDispatcher`` runs requests on worker threads and queues the messages
for the loop to drain.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from queue import Empty, Queue

import pyperclip

from ..browser.messages import (
    ComputeSize,
    ContentLoaded,
    CopyPath,
    CreateEntry,
    DeleteEntry,
    DirectoryPreviewLoaded,
    DuplicateEntry,
    FindByName,
    ListingFailed,
    ListingLoaded,
    MoveEntry,
    Notice,
    OperationFailed,
    PreviewDirectory,
    PreviewFailed,
    ReadContent,
    RefreshListing,
    RenameEntry,
    SelectionWritten,
    SizeComputed,
    StructuralRequest,
    TaskMessage,
    TaskRequest,
    UnzipEntry,
    WriteSelection,
    ZipEntry,
)
from ..filesystem import DirectoryService, format_size
from ..preview import ContentRenderer, RendererError

logger = logging.getLogger(__name__)

UNKNOWN_SIZE = "N/A"
STRUCTURAL_REQUESTS = (RenameEntry, MoveEntry, DuplicateEntry, DeleteEntry, CreateEntry, ZipEntry, UnzipEntry)


class TaskServices:
    """Collaborators a worker may call."""

    def __init__(
        self,
        directory: DirectoryService,
        renderer: ContentRenderer,
        copy_to_clipboard: Callable[[str], None] = pyperclip.copy,
    ) -> None:
        self.directory = directory
        self.renderer = renderer
        self.copy_to_clipboard = copy_to_clipboard


def describe_error(exc: BaseException) -> str:
    """One-line, user-facing description of a failed call."""
    if isinstance(exc, OSError) and exc.strerror:
        if exc.filename:
            return f"{exc.strerror}: {exc.filename}"
        return exc.strerror
    text = str(exc).strip()
    return text.splitlines()[0] if text else type(exc).__name__


def _list(request: RefreshListing, services: TaskServices) -> TaskMessage:
    try:
        entries = services.directory.list(request.directory, request.show_hidden, request.listing_filter)
    except OSError as exc:
        logger.warning("listing %s failed: %s", request.directory, exc)
        return ListingFailed(generation=request.generation, description=describe_error(exc))
    return ListingLoaded(
        generation=request.generation,
        directory=request.directory,
        entries=entries,
        notice=request.notice,
    )


def _run_structural(request: StructuralRequest, directory: DirectoryService) -> None:
    if isinstance(request, RenameEntry):
        directory.rename(request.src, request.dst)
    elif isinstance(request, MoveEntry):
        directory.move_or_copy(request.src, request.dst, request.remove_source)
    elif isinstance(request, DuplicateEntry):
        directory.duplicate(request.path)
    elif isinstance(request, DeleteEntry):
        directory.delete(request.path)
    elif isinstance(request, CreateEntry):
        if request.is_dir:
            directory.create_directory(request.path)
        else:
            directory.create_file(request.path)
    elif isinstance(request, ZipEntry):
        directory.zip(request.path)
    elif isinstance(request, UnzipEntry):
        directory.unzip(request.path)


def execute_request(request: TaskRequest, services: TaskServices) -> TaskMessage:
    """Perform ``request`` and return the message describing its outcome."""
    if isinstance(request, RefreshListing):
        return _list(request, services)

    if isinstance(request, ComputeSize):
        try:
            label = format_size(services.directory.size_of(request.path))
        except OSError as exc:
            logger.debug("size of %s unavailable: %s", request.path, exc)
            label = UNKNOWN_SIZE
        return SizeComputed(generation=request.generation, index=request.index, path=request.path, label=label)

    if isinstance(request, STRUCTURAL_REQUESTS):
        try:
            _run_structural(request, services.directory)
        except OSError as exc:
            logger.warning("%s failed: %s", type(request).__name__, exc)
            return OperationFailed(description=describe_error(exc), refresh=True)
        return _list(request.relist, services)

    if isinstance(request, FindByName):
        try:
            found = services.directory.find_by_name(request.query, request.root)
        except OSError as exc:
            return ListingFailed(generation=request.generation, description=describe_error(exc))
        return ListingLoaded(
            generation=request.generation,
            directory=request.root,
            entries=found.entries,
            found=True,
        )

    if isinstance(request, ReadContent):
        try:
            content = services.renderer.render(request.path, request.width)
        except (OSError, RendererError) as exc:
            logger.warning("preview of %s failed: %s", request.path, exc)
            return PreviewFailed(generation=request.generation, description=describe_error(exc))
        return ContentLoaded(generation=request.generation, path=request.path, content=content)

    if isinstance(request, PreviewDirectory):
        try:
            entries = services.directory.list(request.path, request.show_hidden)
        except OSError as exc:
            return PreviewFailed(generation=request.generation, description=describe_error(exc))
        return DirectoryPreviewLoaded(generation=request.generation, path=request.path, entries=entries)

    if isinstance(request, CopyPath):
        try:
            services.copy_to_clipboard(str(request.path))
        except pyperclip.PyperclipException as exc:
            return OperationFailed(description=f"clipboard unavailable: {describe_error(exc)}")
        return Notice(text=f"Copied {request.path} to clipboard")

    if isinstance(request, WriteSelection):
        try:
            services.directory.write_selection(request.selection_file, request.path)
        except OSError as exc:
            return OperationFailed(description=describe_error(exc))
        return SelectionWritten(path=request.path)

    raise TypeError(f"unknown task request: {request!r}")


class TaskDispatcher:
    """Thread-pool task runner feeding a message queue.

    Size walks get their own pool so a slow directory total never delays a
    listing refresh.
    """

    def __init__(self, services: TaskServices, max_workers: int = 4) -> None:
        self._services = services
        self._messages: Queue[TaskMessage] = Queue()
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="lazyfm-task")
        self._size_executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="lazyfm-size")

    def submit(self, requests: Iterable[TaskRequest]) -> None:
        for request in requests:
            executor = self._size_executor if isinstance(request, ComputeSize) else self._executor
            executor.submit(self._run, request)

    def _run(self, request: TaskRequest) -> None:
        try:
            message = execute_request(request, self._services)
        except Exception as exc:
            logger.exception("task %r crashed", request)
            message = OperationFailed(description=f"internal error: {describe_error(exc)}")
        self._messages.put(message)

    def drain_messages(self) -> list[TaskMessage]:
        """Return every queued message without blocking."""
        out: list[TaskMessage] = []
        while True:
            try:
                out.append(self._messages.get_nowait())
            except Empty:
                break
        return out

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
        self._size_executor.shutdown(wait=False, cancel_futures=True)


__all__ = [
    "TaskDispatcher",
    "TaskServices",
    "UNKNOWN_SIZE",
    "describe_error",
    "execute_request",
]
