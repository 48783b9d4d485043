"""Main loop wiring tests with an inline dispatcher and a fake terminal."""

from __future__ import annotations

import stat
import unittest
from contextlib import contextmanager
from pathlib import Path
from unittest import mock

from lazyfm.browser.machine import BrowserMachine
from lazyfm.browser.messages import ContentLoaded, ListingLoaded, ReadContent, RefreshListing
from lazyfm.filesystem.types import DirectoryEntry
from lazyfm.preview.renderers import RenderedContent
from lazyfm.render import RenderContext
from lazyfm.runtime.loop import normalize_enter, run_main_loop
from lazyfm.ui_theme import resolve_theme

ROOT = Path("/srv/data")
ENTRIES = tuple(
    DirectoryEntry(name=name, path=ROOT / name, is_dir=False, mode=stat.S_IFREG | 0o644)
    for name in ("a.txt", "b.txt")
)


def _respond(request):
    if isinstance(request, RefreshListing):
        return ListingLoaded(request.generation, request.directory, ENTRIES)
    if isinstance(request, ReadContent):
        return ContentLoaded(request.generation, request.path, RenderedContent(kind="text", text="hello"))
    return None


class _InlineDispatcher:
    def __init__(self) -> None:
        self.submitted: list = []
        self._queue: list = []

    def submit(self, requests) -> None:
        for request in requests:
            self.submitted.append(request)
            message = _respond(request)
            if message is not None:
                self._queue.append(message)

    def drain_messages(self) -> list:
        out, self._queue = self._queue, []
        return out


class _FakeTerminal:
    def __init__(self) -> None:
        self.frames: list[str] = []

    @contextmanager
    def raw_mode(self):
        yield

    def write_frame(self, frame: str) -> None:
        self.frames.append(frame)


def _run(machine: BrowserMachine, keys: list[str], launch_editor=lambda _path: None) -> _InlineDispatcher:
    dispatcher = _InlineDispatcher()
    terminal = _FakeTerminal()
    context = RenderContext(machine.state, resolve_theme("plain"))
    with (
        mock.patch("lazyfm.runtime.loop.read_key", side_effect=keys),
        mock.patch("lazyfm.runtime.loop.terminal_size", return_value=(machine.state.term_columns, machine.state.term_rows)),
    ):
        run_main_loop(machine, dispatcher, terminal, 0, context, launch_editor)
    assert terminal.frames, "loop never drew a frame"
    return dispatcher


class NormalizeEnterTests(unittest.TestCase):
    def test_crlf_collapses_to_single_enter(self) -> None:
        key, skip = normalize_enter("ENTER_CR", False)
        self.assertEqual((key, skip), ("ENTER", True))
        self.assertEqual(normalize_enter("ENTER_LF", skip), (None, False))

    def test_bare_lf_is_enter(self) -> None:
        self.assertEqual(normalize_enter("ENTER_LF", False), ("ENTER", False))

    def test_other_keys_clear_skip(self) -> None:
        self.assertEqual(normalize_enter("j", True), ("j", False))


class RunMainLoopTests(unittest.TestCase):
    def test_keys_and_task_results_flow_through_machine(self) -> None:
        machine = BrowserMachine(ROOT, term_columns=40, term_rows=6)

        dispatcher = _run(machine, ["", "j", "ENTER_CR", "ENTER_LF", "q"])

        reads = [request for request in dispatcher.submitted if isinstance(request, ReadContent)]
        self.assertEqual([request.path for request in reads], [ROOT / "b.txt"])
        self.assertEqual(machine.state.listing.cursor, 1)
        self.assertEqual(machine.state.preview_lines, ["hello"])
        self.assertTrue(machine.state.quit_requested)

    def test_resize_is_forwarded(self) -> None:
        machine = BrowserMachine(ROOT, term_columns=40, term_rows=6)
        dispatcher = _InlineDispatcher()
        with (
            mock.patch("lazyfm.runtime.loop.read_key", side_effect=["q"]),
            mock.patch("lazyfm.runtime.loop.terminal_size", return_value=(100, 30)),
        ):
            context = RenderContext(machine.state, resolve_theme("plain"))
            run_main_loop(machine, dispatcher, _FakeTerminal(), 0, context, lambda _path: None)

        self.assertEqual((machine.state.term_columns, machine.state.term_rows), (100, 30))
        self.assertEqual(machine.state.listing.viewport.height, 29)

    def test_editor_request_runs_and_relists(self) -> None:
        machine = BrowserMachine(ROOT, term_columns=40, term_rows=6)
        opened: list[Path] = []

        def launch(path: Path) -> None:
            opened.append(path)
            return None

        dispatcher = _run(machine, ["", "E", "", "q"], launch)

        self.assertEqual(opened, [ROOT / "a.txt"])
        refreshes = [request for request in dispatcher.submitted if isinstance(request, RefreshListing)]
        self.assertEqual(len(refreshes), 2)

    def test_editor_failure_reaches_status(self) -> None:
        machine = BrowserMachine(ROOT, term_columns=40, term_rows=6)

        _run(machine, ["", "E", "", "q"], lambda _path: "$EDITOR not set")

        self.assertEqual(machine.state.status_message, "$EDITOR not set")
        self.assertTrue(machine.state.status_is_error)


if __name__ == "__main__":
    unittest.main()
