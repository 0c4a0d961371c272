"""Tests for single-directory listing.

Covers kind detection, ordering, hidden filtering, and error classification.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from lazycd.entries import Entry, EntryKind, index_of, list_directory
from lazycd.errors import ListingError, ListingErrorKind


class ListDirectoryTests(unittest.TestCase):
    def test_directories_sort_before_files_then_by_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "b.txt").write_text("b\n", encoding="utf-8")
            (root / "A").mkdir()
            (root / "c.txt").write_text("c\n", encoding="utf-8")

            listing = list_directory(root)

        self.assertEqual([entry.name for entry in listing], ["A", "b.txt", "c.txt"])
        self.assertEqual(listing[0].kind, EntryKind.DIRECTORY)
        self.assertEqual(listing[1].kind, EntryKind.FILE)

    def test_every_directory_precedes_every_file_and_names_increase(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("zeta", "Alpha", "mid", "_under"):
                (root / name).mkdir()
            for name in ("a.py", "Z.md", "b", "0.txt"):
                (root / name).write_text("", encoding="utf-8")

            listing = list_directory(root)

        kinds = [entry.kind for entry in listing]
        last_dir = max(i for i, kind in enumerate(kinds) if kind is EntryKind.DIRECTORY)
        first_file = min(i for i, kind in enumerate(kinds) if kind is EntryKind.FILE)
        self.assertLess(last_dir, first_file)

        dir_names = [entry.name for entry in listing if entry.kind is EntryKind.DIRECTORY]
        file_names = [entry.name for entry in listing if entry.kind is EntryKind.FILE]
        self.assertEqual(dir_names, sorted(dir_names))
        self.assertEqual(file_names, sorted(file_names))
        self.assertEqual(len(set(dir_names)), len(dir_names))

    def test_hidden_entries_filtered_unless_requested(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".git").mkdir()
            (root / "visible").mkdir()

            hidden_off = list_directory(root, show_hidden=False)
            hidden_on = list_directory(root, show_hidden=True)

        self.assertEqual([entry.name for entry in hidden_off], ["visible"])
        self.assertEqual([entry.name for entry in hidden_on], [".git", "visible"])
        self.assertTrue(hidden_on[0].is_hidden)
        self.assertFalse(hidden_on[1].is_hidden)

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unavailable")
    def test_symlinks_report_whether_they_point_to_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "real").mkdir()
            (root / "file.txt").write_text("", encoding="utf-8")
            (root / "to_dir").symlink_to(root / "real")
            (root / "to_file").symlink_to(root / "file.txt")
            (root / "broken").symlink_to(root / "missing")

            listing = list_directory(root)

        by_name = {entry.name: entry for entry in listing}
        self.assertEqual(by_name["to_dir"].kind, EntryKind.SYMLINK)
        self.assertTrue(by_name["to_dir"].is_enterable)
        self.assertFalse(by_name["to_file"].is_enterable)
        self.assertFalse(by_name["broken"].points_to_dir)
        self.assertEqual(listing[0].name, "real")

    def test_missing_directory_raises_not_found(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "gone"
            with self.assertRaises(ListingError) as ctx:
                list_directory(missing)

        self.assertEqual(ctx.exception.kind, ListingErrorKind.NOT_FOUND)
        self.assertEqual(ctx.exception.path, missing)
        self.assertIn("not found", ctx.exception.message)

    def test_file_path_raises_not_a_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "plain.txt"
            target.write_text("", encoding="utf-8")
            with self.assertRaises(ListingError) as ctx:
                list_directory(target)

        self.assertEqual(ctx.exception.kind, ListingErrorKind.NOT_A_DIRECTORY)

    def test_os_error_classification(self) -> None:
        path = Path("/nowhere")
        self.assertEqual(
            ListingError.from_os_error(path, PermissionError(13, "denied")).kind,
            ListingErrorKind.PERMISSION_DENIED,
        )
        other = ListingError.from_os_error(path, OSError(5, "Input/output error"))
        self.assertEqual(other.kind, ListingErrorKind.OTHER_IO)
        self.assertIn("Input/output error", other.message)

    def test_index_of_finds_entry_by_name(self) -> None:
        listing = (Entry("A", EntryKind.DIRECTORY), Entry("b.txt", EntryKind.FILE))
        self.assertEqual(index_of(listing, "b.txt"), 1)
        self.assertIsNone(index_of(listing, "c.txt"))


if __name__ == "__main__":
    unittest.main()
