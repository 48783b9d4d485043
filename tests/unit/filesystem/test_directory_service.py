"""DirectoryService behaviour against real temporary directories."""

from __future__ import annotations

import errno
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyfm.filesystem import service as service_module
from lazyfm.filesystem.service import DirectoryService, duplicate_name, format_size
from lazyfm.filesystem.types import DirectoryServiceError, PartialOperationError


class FormatSizeTests(unittest.TestCase):
    def test_decimal_units(self) -> None:
        cases = {
            0: "0 B",
            999: "999 B",
            1000: "1.0 kB",
            4200: "4.2 kB",
            1_000_000: "1.0 MB",
            2_500_000_000: "2.5 GB",
        }
        for size, expected in cases.items():
            with self.subTest(size=size):
                self.assertEqual(format_size(size), expected)

    def test_duplicate_name_keeps_extension(self) -> None:
        self.assertEqual(duplicate_name("notes.txt", 1700000000), "notes_1700000000.txt")
        self.assertEqual(duplicate_name("Makefile", 5), "Makefile_5")


class DirectoryServiceTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.service = DirectoryService()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _names(self, **kwargs) -> set[str]:
        return {entry.name for entry in self.service.list(self.root, **kwargs)}

    def test_list_filters_hidden_and_kinds(self) -> None:
        (self.root / "docs").mkdir()
        (self.root / "a.txt").write_text("hello", encoding="utf-8")
        (self.root / ".env").write_text("SECRET=1", encoding="utf-8")

        self.assertEqual(self._names(show_hidden=False), {"docs", "a.txt"})
        self.assertEqual(self._names(show_hidden=True), {"docs", "a.txt", ".env"})
        self.assertEqual(self._names(show_hidden=True, listing_filter="directories"), {"docs"})
        self.assertEqual(self._names(show_hidden=True, listing_filter="files"), {"a.txt", ".env"})

    def test_list_reports_metadata(self) -> None:
        (self.root / "docs").mkdir()
        (self.root / "a.txt").write_text("hello", encoding="utf-8")
        entries = {entry.name: entry for entry in self.service.list(self.root, show_hidden=False)}

        self.assertTrue(entries["docs"].is_dir)
        self.assertIsNone(entries["docs"].size)
        self.assertFalse(entries["a.txt"].is_dir)
        self.assertEqual(entries["a.txt"].size, 5)
        self.assertTrue(entries["a.txt"].permissions.startswith("-"))

    def test_list_missing_directory_raises(self) -> None:
        with self.assertRaises(FileNotFoundError):
            self.service.list(self.root / "missing", show_hidden=False)

    def test_list_rejects_unknown_filter(self) -> None:
        with self.assertRaises(ValueError):
            self.service.list(self.root, show_hidden=False, listing_filter="symlinks")

    def test_rename_refuses_to_overwrite(self) -> None:
        src = self.root / "a.txt"
        dst = self.root / "b.txt"
        src.write_text("a", encoding="utf-8")
        dst.write_text("b", encoding="utf-8")

        with self.assertRaises(DirectoryServiceError):
            self.service.rename(src, dst)
        self.assertEqual(dst.read_text(encoding="utf-8"), "b")

        self.service.rename(src, self.root / "c.txt")
        self.assertFalse(src.exists())
        self.assertEqual((self.root / "c.txt").read_text(encoding="utf-8"), "a")

    def test_move_into_directory(self) -> None:
        src = self.root / "a.txt"
        src.write_text("a", encoding="utf-8")
        (self.root / "docs").mkdir()

        self.service.move_or_copy(src, self.root / "docs" / "a.txt", remove_source=True)

        self.assertFalse(src.exists())
        self.assertTrue((self.root / "docs" / "a.txt").exists())

    def test_copy_directory_keeps_source(self) -> None:
        src = self.root / "project"
        (src / "nested").mkdir(parents=True)
        (src / "nested" / "file.txt").write_text("x", encoding="utf-8")
        (self.root / "backup").mkdir()

        self.service.move_or_copy(src, self.root / "backup" / "project", remove_source=False)

        self.assertTrue((src / "nested" / "file.txt").exists())
        self.assertTrue((self.root / "backup" / "project" / "nested" / "file.txt").exists())

    def test_move_onto_itself_is_rejected(self) -> None:
        src = self.root / "a.txt"
        src.write_text("a", encoding="utf-8")
        with self.assertRaises(DirectoryServiceError):
            self.service.move_or_copy(src, src, remove_source=True)

    def test_cross_device_move_falls_back_to_copy_and_delete(self) -> None:
        src = self.root / "a.txt"
        src.write_text("a", encoding="utf-8")
        (self.root / "other").mkdir()
        dst = self.root / "other" / "a.txt"

        with mock.patch.object(service_module.os, "rename", side_effect=OSError(errno.EXDEV, "cross-device")):
            self.service.move_or_copy(src, dst, remove_source=True)

        self.assertFalse(src.exists())
        self.assertEqual(dst.read_text(encoding="utf-8"), "a")

    def test_cross_device_move_reports_partial_failure(self) -> None:
        src = self.root / "a.txt"
        src.write_text("a", encoding="utf-8")
        (self.root / "other").mkdir()
        dst = self.root / "other" / "a.txt"

        with (
            mock.patch.object(service_module.os, "rename", side_effect=OSError(errno.EXDEV, "cross-device")),
            mock.patch.object(DirectoryService, "delete", side_effect=PermissionError(errno.EACCES, "Permission denied")),
        ):
            with self.assertRaises(PartialOperationError) as ctx:
                self.service.move_or_copy(src, dst, remove_source=True)

        self.assertIn("could not remove the original", str(ctx.exception))
        self.assertTrue(src.exists())
        self.assertTrue(dst.exists())

    def test_duplicate_creates_timestamped_copy(self) -> None:
        src = self.root / "notes.txt"
        src.write_text("n", encoding="utf-8")

        with mock.patch.object(service_module.time, "time", return_value=1700000000.5):
            target = self.service.duplicate(src)

        self.assertEqual(target, self.root / "notes_1700000000.txt")
        self.assertEqual(target.read_text(encoding="utf-8"), "n")

    def test_delete_file_and_tree(self) -> None:
        (self.root / "tree" / "leaf").mkdir(parents=True)
        (self.root / "tree" / "leaf" / "f").write_text("f", encoding="utf-8")
        (self.root / "a.txt").write_text("a", encoding="utf-8")

        self.service.delete(self.root / "tree")
        self.service.delete(self.root / "a.txt")

        self.assertEqual(os.listdir(self.root), [])

    def test_create_file_refuses_existing(self) -> None:
        self.service.create_file(self.root / "new.txt")
        self.assertTrue((self.root / "new.txt").is_file())
        with self.assertRaises(FileExistsError):
            self.service.create_file(self.root / "new.txt")

    def test_create_directory_makes_parents(self) -> None:
        self.service.create_directory(self.root / "a" / "b")
        self.assertTrue((self.root / "a" / "b").is_dir())
        with self.assertRaises(FileExistsError):
            self.service.create_directory(self.root / "a" / "b")

    def test_size_of_sums_directory_tree(self) -> None:
        (self.root / "d" / "e").mkdir(parents=True)
        (self.root / "d" / "one").write_bytes(b"x" * 10)
        (self.root / "d" / "e" / "two").write_bytes(b"y" * 32)

        self.assertEqual(self.service.size_of(self.root / "d"), 42)
        self.assertEqual(self.service.size_of(self.root / "d" / "one"), 10)

    def test_find_by_name_walks_subdirectories(self) -> None:
        (self.root / "src" / "report").mkdir(parents=True)
        (self.root / "src" / "report" / "report.md").write_text("r", encoding="utf-8")
        (self.root / "other.txt").write_text("o", encoding="utf-8")

        found = self.service.find_by_name("report", self.root)

        self.assertEqual(
            set(found.paths),
            {self.root / "src" / "report", self.root / "src" / "report" / "report.md"},
        )
        self.assertEqual(len(found.entries), 2)
        self.assertEqual([entry.path for entry in found.entries], list(found.paths))

    def test_write_selection(self) -> None:
        selection_file = self.root / "selection"
        self.service.write_selection(selection_file, Path("/srv/data/a.txt"))
        self.assertEqual(selection_file.read_text(encoding="utf-8"), "/srv/data/a.txt\n")


if __name__ == "__main__":
    unittest.main()
