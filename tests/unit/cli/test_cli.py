"""CLI argument and dispatch behavior tests.

Verifies how ``dirwalker.cli.main`` chooses between one-shot scans and the
interactive UI, and how results and errors are reported.
"""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

from dirwalker import cli
from dirwalker.audit_log import LOG_FILE_NAME
from dirwalker.runtime import config
from dirwalker.scan import DirectoryReadError, ScanOutcome, ScanResult


class CliScanOnceTests(unittest.TestCase):
    def test_path_argument_prints_matches(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve() / "project"
            (root / "node_modules").mkdir(parents=True)
            (root / "node_modules" / "d.js").write_text("data-mc-translate", encoding="utf-8")
            (root / "a.js").write_text('data-mc-translate="x"', encoding="utf-8")
            (root / "b.html").write_text("<Message id=1>", encoding="utf-8")
            log_dir = Path(tmp) / "logs"
            out = io.StringIO()

            with redirect_stdout(out):
                cli.main([str(root), "--log-dir", str(log_dir)])

            self.assertEqual(
                out.getvalue(),
                "2 files found with translation content.\na.js\nb.html\n",
            )
            self.assertIn("Matched entry in file", (log_dir / LOG_FILE_NAME).read_text(encoding="utf-8"))

    def test_scan_error_exits_with_status_one(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = io.StringIO()
            with redirect_stdout(out), self.assertRaises(SystemExit) as ctx:
                cli.main([str(Path(tmp) / "missing"), "--log-dir", str(Path(tmp) / "logs")])

            self.assertEqual(ctx.exception.code, 1)
            self.assertIn("An error was encountered: error reading directory:", out.getvalue())

    def test_empty_path_reports_directory_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "a.js").write_text("data-mc-translate", encoding="utf-8")
            previous = os.getcwd()
            os.chdir(tmp)
            try:
                out = io.StringIO()
                with redirect_stdout(out), self.assertRaises(SystemExit) as ctx:
                    cli.main(["", "--log-dir", str(Path(tmp) / "logs")])
            finally:
                os.chdir(previous)

            self.assertEqual(ctx.exception.code, 1)
            self.assertIn("An error was encountered: error reading directory:", out.getvalue())
            self.assertNotIn("a.js", out.getvalue())

    def test_no_path_launches_interactive_app(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirwalker.runtime.config.CONFIG_PATH", config_path), mock.patch(
                "dirwalker.cli.run_app"
            ) as run_app:
                cli.main(["--theme", "Ocean", "--no-color"])

                self.assertEqual(config.load_theme_name(), "ocean")

        run_app.assert_called_once_with(log_dir=None, theme_name="Ocean", no_color=True)

    def test_no_theme_flag_leaves_config_untouched(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirwalker.runtime.config.CONFIG_PATH", config_path), mock.patch(
                "dirwalker.cli.run_app"
            ) as run_app:
                cli.main([])

            self.assertFalse(config_path.exists())
        run_app.assert_called_once_with(log_dir=None, theme_name=None, no_color=False)


class ReportOutcomeTests(unittest.TestCase):
    def test_success_report(self) -> None:
        out = io.StringIO()
        result = ScanResult(root=Path("/p"), names=("x.js",))
        self.assertEqual(cli.report_outcome(ScanOutcome(result=result), out), 0)
        self.assertEqual(out.getvalue(), "1 files found with translation content.\nx.js\n")

    def test_error_report(self) -> None:
        out = io.StringIO()
        error = DirectoryReadError("error reading directory: nope", Path("/p"))
        self.assertEqual(cli.report_outcome(ScanOutcome(error=error), out), 1)
        self.assertEqual(out.getvalue(), "An error was encountered: error reading directory: nope\n")


if __name__ == "__main__":
    unittest.main()
