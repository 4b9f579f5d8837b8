#!/usr/bin/env python3
"""Tests for config.missing_settings — startup admission control."""

import os
import tempfile
import unittest
from unittest.mock import patch

from tiktok_automation import config
from tiktok_automation.domain.errors import ConfigurationError


def _values(directory, **overrides):
    credentials = os.path.join(directory, "credentials.json")
    with open(credentials, "w") as f:
        f.write("{}")
    values = {
        "GEMINI_API_KEY": "real-gemini",
        "ELEVENLABS_API_KEY": "real-tts",
        "MERGE_SERVICE_URL": "https://merge.example.com",
        "RAW_VIDEO_FILE_ID": "raw-1",
        "OUTPUT_FOLDER_ID": "folder-1",
        "GOOGLE_DRIVE_CREDENTIALS_FILE": credentials,
        "GOOGLE_DRIVE_TOKEN_FILE": os.path.join(directory, "token.pickle"),
    }
    values.update(overrides)
    return values


class TestMissingSettings(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def test_complete_settings(self):
        self.assertEqual(config.missing_settings(_values(self.dir)), [])

    def test_placeholder_values_reported(self):
        values = _values(
            self.dir,
            GEMINI_API_KEY=config.PLACEHOLDER_GEMINI_API_KEY,
            OUTPUT_FOLDER_ID=config.PLACEHOLDER_OUTPUT_FOLDER_ID,
        )
        self.assertEqual(config.missing_settings(values), ["GEMINI_API_KEY", "OUTPUT_FOLDER_ID"])

    def test_blank_values_reported(self):
        values = _values(self.dir, ELEVENLABS_API_KEY="  ", MERGE_SERVICE_URL="")
        self.assertEqual(config.missing_settings(values), ["ELEVENLABS_API_KEY", "MERGE_SERVICE_URL"])

    def test_drive_credentials_missing(self):
        values = _values(self.dir, GOOGLE_DRIVE_CREDENTIALS_FILE=os.path.join(self.dir, "nope.json"))
        self.assertEqual(config.missing_settings(values), ["GOOGLE_DRIVE_CREDENTIALS_FILE"])

    def test_cached_token_is_enough(self):
        token = os.path.join(self.dir, "token.pickle")
        with open(token, "wb") as f:
            f.write(b"token")
        values = _values(
            self.dir,
            GOOGLE_DRIVE_CREDENTIALS_FILE=os.path.join(self.dir, "nope.json"),
            GOOGLE_DRIVE_TOKEN_FILE=token,
        )
        self.assertEqual(config.missing_settings(values), [])


    def test_invalid_numbers_reported_after_missing(self):
        values = _values(self.dir, GEMINI_API_KEY="")
        self.assertEqual(
            config.missing_settings(values, invalid=["TTS_STABILITY"]),
            ["GEMINI_API_KEY", "TTS_STABILITY"],
        )


# ---------------------------------------------------------------
# Numeric environment values
# ---------------------------------------------------------------

class TestFloatEnv(unittest.TestCase):

    def setUp(self):
        self._invalid = list(config.INVALID_SETTINGS)

    def tearDown(self):
        config.INVALID_SETTINGS[:] = self._invalid

    @patch.dict(os.environ, {"TTS_STABILITY": "abc"})
    def test_unparsable_value_falls_back_and_is_recorded(self):
        self.assertEqual(config._float_env("TTS_STABILITY", 0.75), 0.75)
        self.assertIn("TTS_STABILITY", config.INVALID_SETTINGS)

    @patch.dict(os.environ, {"HTTP_TIMEOUT": "12.5"})
    def test_parses_value(self):
        self.assertEqual(config._float_env("HTTP_TIMEOUT", 30.0), 12.5)
        self.assertNotIn("HTTP_TIMEOUT", config.INVALID_SETTINGS[len(self._invalid):])

    @patch.dict(os.environ, {"TRIGGER_INTERVAL_HOURS": "  "})
    def test_blank_value_uses_default(self):
        self.assertEqual(config._float_env("TRIGGER_INTERVAL_HOURS", 3.0), 3.0)


# ---------------------------------------------------------------
# require_settings
# ---------------------------------------------------------------

class TestRequireSettings(unittest.TestCase):

    @patch("tiktok_automation.config.missing_settings", return_value=["GEMINI_API_KEY", "HTTP_TIMEOUT"])
    def test_raises_configuration_error(self, _missing):
        with self.assertRaises(ConfigurationError) as ctx:
            config.require_settings()
        self.assertEqual(ctx.exception.missing, ["GEMINI_API_KEY", "HTTP_TIMEOUT"])
        self.assertIn("HTTP_TIMEOUT", str(ctx.exception))

    @patch("tiktok_automation.config.missing_settings", return_value=[])
    def test_passes_when_complete(self, _missing):
        self.assertIsNone(config.require_settings())


if __name__ == "__main__":
    unittest.main()
