"""Key decoding from raw terminal bytes, fed through a pipe."""

from __future__ import annotations

import os
import stat
import unittest
from pathlib import Path

from lazyfm.browser.machine import BrowserMachine
from lazyfm.browser.messages import ListingLoaded
from lazyfm.browser.modes import Renaming
from lazyfm.filesystem.types import DirectoryEntry
from lazyfm.input import reader
from lazyfm.input.reader import read_key


class _PipeTestCase(unittest.TestCase):
    def setUp(self) -> None:
        reader._PENDING_BYTES.clear()
        self.read_fd, self.write_fd = os.pipe()

    def tearDown(self) -> None:
        os.close(self.read_fd)
        os.close(self.write_fd)
        reader._PENDING_BYTES.clear()

    def _keys(self, data: bytes, count: int) -> list[str]:
        os.write(self.write_fd, data)
        return [read_key(self.read_fd, timeout_ms=50) for _ in range(count)]


class ReadKeyTests(_PipeTestCase):
    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(read_key(self.read_fd, timeout_ms=0), "")

    def test_plain_and_control_keys(self) -> None:
        self.assertEqual(
            self._keys(b"j\x03\x04\x06\x15\t\x7f\r\n", 9),
            ["j", "CTRL_C", "CTRL_D", "CTRL_F", "CTRL_U", "TAB", "BACKSPACE", "ENTER_CR", "ENTER_LF"],
        )

    def test_utf8_characters_are_read_whole(self) -> None:
        self.assertEqual(self._keys("é日".encode("utf-8"), 2), ["é", "日"])

    def test_arrow_sequences(self) -> None:
        self.assertEqual(self._keys(b"\x1b[A\x1b[B\x1bOC\x1b[D", 4), ["UP", "DOWN", "RIGHT", "LEFT"])

    def test_editing_keys_are_named(self) -> None:
        self.assertEqual(
            self._keys(b"\x1b[3~\x1b[5~\x1b[6~\x1b[2~\x1b[H\x1b[F\x1b[1~\x1b[4~", 8),
            ["DELETE", "PAGE_UP", "PAGE_DOWN", "INSERT", "HOME", "END", "HOME", "END"],
        )

    def test_ss3_home_and_end(self) -> None:
        self.assertEqual(self._keys(b"\x1bOH\x1bOF", 2), ["HOME", "END"])

    def test_unknown_sequences_are_consumed_whole(self) -> None:
        # Ctrl+Up, F5, F1: nothing may leak out as printable keys.
        self.assertEqual(self._keys(b"\x1b[1;5A\x1b[15~\x1bOPx", 4), ["", "", "", "x"])

    def test_lone_escape(self) -> None:
        self.assertEqual(self._keys(b"\x1b", 1), ["ESC"])

    def test_escape_followed_by_key_keeps_the_key(self) -> None:
        self.assertEqual(self._keys(b"\x1bq", 2), ["ESC", "q"])

    def test_sgr_mouse_wheel(self) -> None:
        self.assertEqual(
            self._keys(b"\x1b[<64;12;5M\x1b[<65;3;9M\x1b[<0;1;1M", 3),
            ["MOUSE_WHEEL_UP:12:5", "MOUSE_WHEEL_DOWN:3:9", "MOUSE"],
        )

    def test_malformed_mouse_sequence(self) -> None:
        self.assertEqual(self._keys(b"\x1b[<64;x;5Mj", 2), ["", "j"])


class DecodedKeysInPromptTests(_PipeTestCase):
    def test_delete_key_does_not_cancel_rename_prompt(self) -> None:
        root = Path("/srv/data")
        entry = DirectoryEntry(name="a.txt", path=root / "a.txt", is_dir=False, mode=stat.S_IFREG | 0o644)
        machine = BrowserMachine(root, term_columns=80, term_rows=10)
        [refresh] = machine.start()
        machine.apply(ListingLoaded(refresh.generation, root, (entry,)))
        machine.handle_key("R")

        requests = []
        for key in self._keys(b"new\x1b[3~\x1b[5~", 5):
            requests.extend(machine.handle_key(key))

        self.assertEqual(requests, [])
        self.assertEqual(machine.state.mode, Renaming(target=entry))
        self.assertEqual(machine.state.pending_text, "new")
        self.assertEqual(machine.state.cwd, root)


if __name__ == "__main__":
    unittest.main()
