"""Tests for CLI argument handling and runtime dispatch."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazysheets import cli
from lazysheets.errors import SourceReadError
from lazysheets.reconfigure import BrowseOptions


class CliMainTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name) / "books"
        self.root.mkdir()
        for name in ("b.xlsx", "a.xlsx", "notes.txt"):
            (self.root / name).write_bytes(b"")
        patcher = mock.patch("lazysheets.runtime.config.CONFIG_PATH", Path(self._tmp.name) / "config.json")
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_list_flag_prints_matching_files(self) -> None:
        with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
            cli.main(argv=[str(self.root), "--list"])

        self.assertEqual(stdout.getvalue(), "a.xlsx\nb.xlsx\n")

    def test_non_terminal_stdin_prints_listing_instead_of_tui(self) -> None:
        with mock.patch("lazysheets.cli.stdin_is_terminal", return_value=False), mock.patch(
            "lazysheets.cli.run_browser"
        ) as run_mock, mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
            cli.main(argv=[str(self.root), "--extension", "txt"])

        run_mock.assert_not_called()
        self.assertEqual(stdout.getvalue(), "notes.txt\n")

    def test_missing_path_and_file_path_exit(self) -> None:
        with self.assertRaises(SystemExit):
            cli.main(argv=[str(self.root / "missing")])
        with self.assertRaises(SystemExit):
            cli.main(argv=[str(self.root / "a.xlsx")])

    def test_default_path_is_used_without_positional(self) -> None:
        with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
            cli.main(default_path=self.root, argv=["--list"])

        self.assertEqual(stdout.getvalue(), "a.xlsx\nb.xlsx\n")

    def test_terminal_session_launches_browser_and_persists_theme(self) -> None:
        with mock.patch("lazysheets.cli.stdin_is_terminal", return_value=True), mock.patch(
            "lazysheets.cli.run_browser"
        ) as run_mock, mock.patch("lazysheets.cli.configure_logging") as logging_mock, mock.patch(
            "lazysheets.cli.save_theme_name"
        ) as save_mock:
            cli.main(argv=[str(self.root), "--theme", "ocean", "--debug"])

        logging_mock.assert_called_once_with(None, debug=True)
        save_mock.assert_called_once_with("ocean")
        run_mock.assert_called_once_with(
            self.root,
            BrowseOptions(extension=".xlsx", show_hidden=False, max_preview_rows=200),
            theme_name="ocean",
            no_color=False,
        )

    def test_startup_listing_failure_exits(self) -> None:
        with mock.patch("lazysheets.cli.stdin_is_terminal", return_value=True), mock.patch(
            "lazysheets.cli.run_browser", side_effect=SourceReadError("cannot read directory")
        ), mock.patch("lazysheets.cli.configure_logging"):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(argv=[str(self.root)])

        self.assertEqual(str(ctx.exception), "cannot read directory")


if __name__ == "__main__":
    unittest.main()
