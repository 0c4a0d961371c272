"""CLI argument, exit-status, and option-merging tests."""

from __future__ import annotations

import io
import tempfile
import unittest
from contextlib import redirect_stderr
from pathlib import Path
from unittest import mock

from lazycd import cli
from lazycd.app import Outcome, RunResult
from lazycd.errors import OutputWriteError
from lazycd.ui_theme import OCEAN_THEME, PLAIN_THEME


class CliMainTests(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name).resolve()
        config_patch = mock.patch("lazycd.config.CONFIG_PATH", self.root / "missing-config.json")
        config_patch.start()
        self.addCleanup(config_patch.stop)
        terminal_patch = mock.patch("lazycd.cli.TerminalController")
        self.terminal_cls = terminal_patch.start()
        self.terminal_cls.return_value.size.return_value = (80, 24)
        self.addCleanup(terminal_patch.stop)
        self.stdin_patch = mock.patch("lazycd.cli.sys.stdin")
        self.stdin_patch.start()
        self.addCleanup(self.stdin_patch.stop)

    def test_runs_picker_in_default_path_and_returns_zero(self) -> None:
        (self.root / "sub").mkdir()
        with mock.patch("lazycd.cli.PickerApp") as app_cls, mock.patch("lazycd.cli.sys.stdout"):
            app_cls.return_value.run.return_value = RunResult(Outcome.QUIT)
            status = cli.main([], default_path=self.root)

        self.assertEqual(status, 0)
        nav = app_cls.call_args.args[0]
        self.assertEqual(nav.current_path, self.root)
        self.assertEqual([entry.name for entry in nav.listing], ["sub"])
        self.assertEqual(app_cls.call_args.kwargs["display"].theme.name, "default")

    def test_flags_override_config(self) -> None:
        (self.root / ".hidden").mkdir()
        output = self.root / "out"
        with mock.patch("lazycd.cli.PickerApp") as app_cls, mock.patch("lazycd.cli.sys.stdout"):
            app_cls.return_value.run.return_value = RunResult(Outcome.QUIT)
            cli.main([str(self.root), "-a", "-i", "--theme", "ocean", "--output", str(output)])

        nav = app_cls.call_args.args[0]
        kwargs = app_cls.call_args.kwargs
        self.assertTrue(nav.show_hidden)
        self.assertEqual([entry.name for entry in nav.listing], [".hidden"])
        self.assertTrue(kwargs["display"].show_icons)
        self.assertIs(kwargs["display"].theme, OCEAN_THEME)
        self.assertEqual(kwargs["output_path"], output)

    def test_no_color_selects_plain_theme(self) -> None:
        with mock.patch("lazycd.cli.PickerApp") as app_cls, mock.patch("lazycd.cli.sys.stdout"):
            app_cls.return_value.run.return_value = RunResult(Outcome.QUIT)
            cli.main([str(self.root), "--no-color"])
        self.assertIs(app_cls.call_args.kwargs["display"].theme, PLAIN_THEME)

    def test_unlistable_start_directory_exits_non_zero(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr), mock.patch("lazycd.cli.PickerApp") as app_cls:
            status = cli.main([str(self.root / "missing")])

        self.assertEqual(status, 1)
        app_cls.assert_not_called()
        self.assertIn("not found", stderr.getvalue())

    def test_output_write_failure_exits_non_zero(self) -> None:
        stderr = io.StringIO()
        error = OutputWriteError(Path("/nope/out"), PermissionError(13, "Permission denied"))
        with redirect_stderr(stderr), mock.patch("lazycd.cli.PickerApp") as app_cls, mock.patch(
            "lazycd.cli.sys.stdout"
        ):
            app_cls.return_value.run.side_effect = error
            status = cli.main([str(self.root)])

        self.assertEqual(status, 1)
        self.assertIn("cannot write selection to /nope/out", stderr.getvalue())

    def test_confirm_end_to_end_writes_selection(self) -> None:
        docs = self.root / "docs"
        docs.mkdir()
        output = self.root / "selection"
        keys = iter(["l", "ENTER"])
        with mock.patch("lazycd.app.read_key", side_effect=lambda fd: next(keys)), mock.patch(
            "lazycd.app.Renderer.draw"
        ), mock.patch("lazycd.cli.sys.stdout"):
            status = cli.main([str(self.root), "--output", str(output)])

        self.assertEqual(status, 0)
        self.assertEqual(output.read_text(encoding="utf-8"), f"{docs}\n")


if __name__ == "__main__":
    unittest.main()
