#!/usr/bin/env python3
"""Tests for adapters/merger.py — artifact encoding and reply handling."""

import base64
import unittest
from unittest.mock import MagicMock, patch

from tiktok_automation.adapters.merger import HttpMediaMerger, encode_artifact
from tiktok_automation.domain.errors import EmptyResultError
from tiktok_automation.domain.models import Artifact


def _response(payload):
    response = MagicMock()
    response.status_code = 200
    response.json.return_value = payload
    return response


class TestEncodeArtifact(unittest.TestCase):

    def test_reference_is_url(self):
        self.assertEqual(encode_artifact(Artifact.by_reference("https://a/b.mp3")), "https://a/b.mp3")

    def test_value_is_base64(self):
        encoded = encode_artifact(Artifact.by_value(b"\x00\x01audio"))
        self.assertEqual(base64.b64decode(encoded), b"\x00\x01audio")


class TestHttpMediaMerger(unittest.TestCase):

    def setUp(self):
        self.merger = HttpMediaMerger(base_url="https://merge.example.com/", api_key="k", timeout=30)

    @patch("tiktok_automation.adapters.http.requests.request")
    def test_posts_audio_video_and_offset(self, mock_request):
        mock_request.return_value = _response({"output_url": "https://merge.example.com/out.mp4"})
        result = self.merger.merge(
            Artifact.by_value(b"mp3"), Artifact.by_reference("https://drive/raw"), 0
        )

        args, kwargs = mock_request.call_args
        self.assertEqual(args, ("POST", "https://merge.example.com/merge"))
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer k")
        self.assertEqual(kwargs["json"], {
            "audio_url": base64.b64encode(b"mp3").decode("ascii"),
            "video_url": "https://drive/raw",
            "start_offset": 0,
        })
        self.assertTrue(result.is_reference)
        self.assertEqual(result.url, "https://merge.example.com/out.mp4")

    @patch("tiktok_automation.adapters.http.requests.request")
    def test_missing_output_url_is_empty_result(self, mock_request):
        mock_request.return_value = _response({"status": "queued"})
        with self.assertRaises(EmptyResultError):
            self.merger.merge(Artifact.by_reference("a"), Artifact.by_reference("v"))


if __name__ == "__main__":
    unittest.main()
