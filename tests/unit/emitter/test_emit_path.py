"""Tests for writing the selected directory to the output file."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lazycd.emitter import emit_path
from lazycd.errors import OutputWriteError


class EmitPathTests(unittest.TestCase):
    def test_writes_single_newline_terminated_line(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / "selection"
            emit_path(Path("/home/u/docs"), output)
            self.assertEqual(output.read_bytes(), b"/home/u/docs\n")

    def test_overwrites_previous_content_and_encodes_utf8(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / "selection"
            output.write_text("/old/path/that/is/longer\nextra\n", encoding="utf-8")
            emit_path(Path("/srv/café"), output)
            self.assertEqual(output.read_bytes(), "/srv/café\n".encode("utf-8"))

    def test_creates_missing_parent_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / "nested" / "dir" / "selection"
            emit_path(Path("/"), output)
            self.assertEqual(output.read_text(encoding="utf-8"), "/\n")

    def test_unwritable_target_raises_output_write_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")
            with self.assertRaises(OutputWriteError) as ctx:
                emit_path(Path("/home/u"), blocker / "selection")
            self.assertEqual(ctx.exception.output_path, blocker / "selection")
            self.assertIn("cannot write selection", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
