from __future__ import annotations

import io
import json
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from taqvim import cli
from taqvim.config import AppSettings, LlmSettings, UiSettings
from taqvim.domain import CalendarDate, SuggestionError
from taqvim.services import EventSuggestion


def _settings() -> AppSettings:
    llm = LlmSettings(
        api_key=None,
        model="test-model",
        base_url=None,
        api_version=None,
        organization=None,
        project=None,
    )
    return AppSettings(llm=llm, ui=UiSettings(app_name="Taqvim", week_start_offset=1))


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        patches = [
            mock.patch.object(cli, "configure_logging"),
            mock.patch.object(cli, "get_settings", return_value=_settings()),
        ]
        for patcher in patches:
            patcher.start()
            self.addCleanup(patcher.stop)

    def test_render_month(self) -> None:
        lines = cli.render_month(2024, 0, 1)
        self.assertEqual(lines[0], "فروردین 1403")
        self.assertEqual(len(lines), 2 + 5)
        self.assertEqual(lines[2].split(), ["1", "2", "3", "4", "5"])
        self.assertEqual(lines[-1].split(), ["27", "28", "29", "30", "31"])

    def test_month_command(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out):
            code = cli.main(["month", "--year", "2024", "--month", "2"])
        self.assertEqual(code, 0)
        self.assertIn("اردیبهشت 1403", out.getvalue())
        self.assertIn("29", out.getvalue())

    def test_month_command_rejects_bad_month(self) -> None:
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            cli.main(["month", "--month", "13"])

    def test_month_command_rejects_unsupported_year(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err):
            code = cli.main(["month", "--year", "0", "--month", "1"])
        self.assertEqual(code, 2)
        self.assertIn("year", err.getvalue())

    def test_suggest_command(self) -> None:
        service = mock.Mock()
        service.suggest.return_value = EventSuggestion(title="عنوان", description="توضیح")
        out = io.StringIO()
        with mock.patch.object(cli, "SuggestionService", return_value=service), redirect_stdout(out):
            code = cli.main(["suggest", "--date", "2024-01-15"])
        self.assertEqual(code, 0)
        service.suggest.assert_called_once_with(CalendarDate(2024, 0, 15))
        self.assertEqual(json.loads(out.getvalue()), {"title": "عنوان", "description": "توضیح"})

    def test_suggest_command_reports_failure(self) -> None:
        service = mock.Mock()
        service.suggest.side_effect = SuggestionError("not configured")
        err = io.StringIO()
        with mock.patch.object(cli, "SuggestionService", return_value=service), redirect_stderr(err):
            code = cli.main(["suggest", "--date", "2024-01-15"])
        self.assertEqual(code, 1)
        self.assertIn("not configured", err.getvalue())

    def test_suggest_command_rejects_bad_date(self) -> None:
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            cli.main(["suggest", "--date", "15/01/2024"])


if __name__ == "__main__":
    unittest.main()
