"""Task execution: every request maps to exactly one outcome message."""

from __future__ import annotations

import errno
import tempfile
import time
import unittest
from pathlib import Path
from unittest import mock

import pyperclip

from lazyfm.browser.messages import (
    ComputeSize,
    ContentLoaded,
    CopyPath,
    CreateEntry,
    DeleteEntry,
    DirectoryPreviewLoaded,
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
    WriteSelection,
)
from lazyfm.filesystem import DirectoryService
from lazyfm.preview import ContentRenderer, RendererError
from lazyfm.runtime.tasks import TaskDispatcher, TaskServices, describe_error, execute_request


class _FailingRenderer:
    def render(self, path: Path, width: int):
        raise RendererError(f"cannot decode image {path.name}: truncated")


class ExecuteRequestTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.copied: list[str] = []
        self.services = TaskServices(DirectoryService(), ContentRenderer(), copy_to_clipboard=self.copied.append)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _relist(self, notice: str = "") -> RefreshListing:
        return RefreshListing(generation=5, directory=self.root, show_hidden=False, notice=notice)

    def test_refresh_lists_directory(self) -> None:
        (self.root / "a.txt").write_text("a", encoding="utf-8")

        message = execute_request(self._relist(), self.services)

        self.assertIsInstance(message, ListingLoaded)
        self.assertEqual(message.generation, 5)
        self.assertEqual([entry.name for entry in message.entries], ["a.txt"])

    def test_refresh_of_missing_directory_fails_with_generation(self) -> None:
        request = RefreshListing(generation=9, directory=self.root / "missing", show_hidden=False)

        message = execute_request(request, self.services)

        self.assertIsInstance(message, ListingFailed)
        self.assertEqual(message.generation, 9)
        self.assertIn("No such file or directory", message.description)

    def test_size_failure_becomes_placeholder_label(self) -> None:
        (self.root / "a.txt").write_bytes(b"x" * 1500)
        ok = execute_request(ComputeSize(generation=2, index=0, path=self.root / "a.txt"), self.services)
        missing = execute_request(ComputeSize(generation=2, index=1, path=self.root / "gone"), self.services)

        self.assertEqual(ok, SizeComputed(generation=2, index=0, path=self.root / "a.txt", label="1.5 kB"))
        self.assertEqual(missing.label, "N/A")

    def test_structural_success_relists_with_notice(self) -> None:
        request = CreateEntry(path=self.root / "docs", is_dir=True, relist=self._relist("Created docs"))

        message = execute_request(request, self.services)

        self.assertIsInstance(message, ListingLoaded)
        self.assertEqual(message.notice, "Created docs")
        self.assertEqual([entry.name for entry in message.entries], ["docs"])

    def test_structural_failure_requests_refresh(self) -> None:
        (self.root / "a.txt").write_text("a", encoding="utf-8")
        (self.root / "b.txt").write_text("b", encoding="utf-8")
        requests = [
            RenameEntry(src=self.root / "a.txt", dst=self.root / "b.txt", relist=self._relist()),
            DeleteEntry(path=self.root / "missing", relist=self._relist()),
            MoveEntry(src=self.root / "gone", dst=self.root / "x", remove_source=True, relist=self._relist()),
        ]
        for request in requests:
            with self.subTest(request=type(request).__name__):
                message = execute_request(request, self.services)
                self.assertIsInstance(message, OperationFailed)
                self.assertTrue(message.refresh)

    def test_find_reports_found_listing_rooted_at_search_root(self) -> None:
        (self.root / "deep").mkdir()
        (self.root / "deep" / "report.txt").write_text("r", encoding="utf-8")

        message = execute_request(FindByName(generation=4, query="report", root=self.root), self.services)

        self.assertIsInstance(message, ListingLoaded)
        self.assertTrue(message.found)
        self.assertEqual(message.directory, self.root)
        self.assertEqual([entry.path for entry in message.entries], [self.root / "deep" / "report.txt"])

    def test_read_content(self) -> None:
        path = self.root / "notes.txt"
        path.write_text("hello\n", encoding="utf-8")

        message = execute_request(ReadContent(generation=3, path=path, width=40), self.services)

        self.assertIsInstance(message, ContentLoaded)
        self.assertEqual(message.generation, 3)

    def test_renderer_error_becomes_preview_failure(self) -> None:
        services = TaskServices(DirectoryService(), _FailingRenderer(), copy_to_clipboard=self.copied.append)

        message = execute_request(ReadContent(generation=3, path=self.root / "x.png", width=40), services)

        self.assertEqual(message, PreviewFailed(generation=3, description="cannot decode image x.png: truncated"))

    def test_preview_directory(self) -> None:
        (self.root / "sub").mkdir()
        (self.root / "sub" / "inner.txt").write_text("i", encoding="utf-8")

        message = execute_request(PreviewDirectory(generation=6, path=self.root / "sub", show_hidden=False), self.services)

        self.assertIsInstance(message, DirectoryPreviewLoaded)
        self.assertEqual([entry.name for entry in message.entries], ["inner.txt"])

    def test_copy_path(self) -> None:
        message = execute_request(CopyPath(path=self.root / "a.txt"), self.services)
        self.assertEqual(self.copied, [str(self.root / "a.txt")])
        self.assertEqual(message, Notice(text=f"Copied {self.root / 'a.txt'} to clipboard"))

    def test_copy_path_without_clipboard(self) -> None:
        def unavailable(_text: str) -> None:
            raise pyperclip.PyperclipException("could not find a copy/paste mechanism")

        services = TaskServices(DirectoryService(), ContentRenderer(), copy_to_clipboard=unavailable)
        message = execute_request(CopyPath(path=self.root), services)

        self.assertIsInstance(message, OperationFailed)
        self.assertFalse(message.refresh)
        self.assertTrue(message.description.startswith("clipboard unavailable"))

    def test_write_selection(self) -> None:
        selection = self.root / "selection"
        message = execute_request(WriteSelection(selection_file=selection, path=self.root / "a"), self.services)
        self.assertEqual(message, SelectionWritten(path=self.root / "a"))
        self.assertEqual(selection.read_text(encoding="utf-8"), f"{self.root / 'a'}\n")

    def test_unknown_request_raises(self) -> None:
        with self.assertRaises(TypeError):
            execute_request(object(), self.services)  # type: ignore[arg-type]

    def test_describe_error(self) -> None:
        self.assertEqual(
            describe_error(PermissionError(errno.EACCES, "Permission denied", "/srv/x")),
            "Permission denied: /srv/x",
        )
        self.assertEqual(describe_error(ValueError("bad\nsecond line")), "bad")
        self.assertEqual(describe_error(RuntimeError()), "RuntimeError")


def _collect(dispatcher: TaskDispatcher, count: int, timeout: float = 5.0) -> list:
    deadline = time.monotonic() + timeout
    messages: list = []
    while len(messages) < count and time.monotonic() < deadline:
        messages.extend(dispatcher.drain_messages())
        time.sleep(0.01)
    return messages


class TaskDispatcherTests(unittest.TestCase):
    def test_results_are_queued_for_the_loop(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            dispatcher = TaskDispatcher(TaskServices(DirectoryService(), ContentRenderer(), copy_to_clipboard=print))
            try:
                dispatcher.submit(
                    [
                        RefreshListing(generation=1, directory=root, show_hidden=False),
                        ComputeSize(generation=1, index=0, path=root),
                    ]
                )
                messages = _collect(dispatcher, 2)
            finally:
                dispatcher.shutdown()

        self.assertEqual({type(message) for message in messages}, {ListingLoaded, SizeComputed})
        self.assertEqual(dispatcher.drain_messages(), [])

    def test_crashing_task_is_reported_not_raised(self) -> None:
        directory = mock.Mock(spec=DirectoryService)
        directory.list.side_effect = RuntimeError("boom")
        dispatcher = TaskDispatcher(TaskServices(directory, ContentRenderer(), copy_to_clipboard=print))
        try:
            dispatcher.submit([RefreshListing(generation=1, directory=Path("/srv"), show_hidden=False)])
            messages = _collect(dispatcher, 1)
        finally:
            dispatcher.shutdown()

        self.assertEqual(messages, [OperationFailed(description="internal error: boom")])

    def test_drain_without_tasks_is_empty(self) -> None:
        dispatcher = TaskDispatcher(TaskServices(DirectoryService(), ContentRenderer(), copy_to_clipboard=print))
        try:
            self.assertEqual(dispatcher.drain_messages(), [])
        finally:
            dispatcher.shutdown()


if __name__ == "__main__":
    unittest.main()
