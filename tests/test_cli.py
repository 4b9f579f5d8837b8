#!/usr/bin/env python3
"""Tests for cli.main — admission control and run modes."""

import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import MagicMock, patch

from tiktok_automation import cli
from tiktok_automation.domain.errors import ConfigurationError
from tiktok_automation.domain.models import Run


def _fake_adapters():
    return {
        "text_generator": MagicMock(),
        "evaluator": MagicMock(),
        "speech_synthesizer": MagicMock(),
        "asset_store": MagicMock(),
        "media_merger": MagicMock(),
        "raw_video_id": "raw-1",
        "output_folder_id": "folder-1",
    }


class TestCli(unittest.TestCase):

    @patch("tiktok_automation.adapters.default_adapters")
    @patch("tiktok_automation.config.missing_settings", return_value=["GEMINI_API_KEY"])
    def test_placeholder_credentials_exit_before_any_adapter(self, _missing, mock_adapters):
        output = io.StringIO()
        with redirect_stdout(output):
            self.assertEqual(cli.main(["--once"]), 1)
        mock_adapters.assert_not_called()
        self.assertIn("GEMINI_API_KEY", output.getvalue())

    @patch("tiktok_automation.adapters.default_adapters")
    @patch("tiktok_automation.config.require_settings", side_effect=ConfigurationError(["HTTP_TIMEOUT"]))
    def test_configuration_error_exits_with_status_1(self, _require, mock_adapters):
        output = io.StringIO()
        with redirect_stdout(output):
            self.assertEqual(cli.main([]), 1)
        mock_adapters.assert_not_called()
        self.assertIn("Missing, placeholder or invalid settings: HTTP_TIMEOUT", output.getvalue())

    @patch("tiktok_automation.application.scheduler.Scheduler.run_once")
    @patch("tiktok_automation.adapters.default_adapters", side_effect=_fake_adapters)
    @patch("tiktok_automation.config.missing_settings", return_value=[])
    def test_once_success(self, _missing, _adapters, mock_run_once):
        mock_run_once.return_value = Run(topic="space")
        self.assertEqual(cli.main(["--once", "--topic", "space"]), 0)
        mock_run_once.assert_called_once_with()

    @patch("tiktok_automation.application.scheduler.Scheduler.run_once", return_value=None)
    @patch("tiktok_automation.adapters.default_adapters", side_effect=_fake_adapters)
    @patch("tiktok_automation.config.missing_settings", return_value=[])
    def test_once_failure_exit_code(self, _missing, _adapters, _run_once):
        self.assertEqual(cli.main(["--once"]), 1)

    @patch("tiktok_automation.application.scheduler.Scheduler.run_forever", return_value=0)
    @patch("tiktok_automation.adapters.default_adapters", side_effect=_fake_adapters)
    @patch("tiktok_automation.config.missing_settings", return_value=[])
    def test_scheduled_mode_by_default(self, _missing, _adapters, mock_forever):
        self.assertEqual(cli.main(["--interval-hours", "0.5"]), 0)
        mock_forever.assert_called_once_with()


class TestDefaultAdapters(unittest.TestCase):

    def test_overrides_skip_construction_and_share_evaluator(self):
        from tiktok_automation.adapters import default_adapters

        writer = MagicMock()
        adapters = default_adapters(
            text_generator=writer,
            speech_synthesizer=MagicMock(),
            asset_store=MagicMock(),
            media_merger=MagicMock(),
            raw_video_id="raw-1",
            output_folder_id="folder-1",
        )
        self.assertIs(adapters["evaluator"], writer)
        self.assertEqual(adapters["raw_video_id"], "raw-1")
        self.assertEqual(adapters["output_folder_id"], "folder-1")


if __name__ == "__main__":
    unittest.main()
