#!/usr/bin/env python3
"""Tests for domain/quality.py — score_gate and suggestion_gate."""

import unittest

from tiktok_automation.domain.models import Verdict
from tiktok_automation.domain.quality import score_gate, suggestion_gate


# ---------------------------------------------------------------
# score_gate
# ---------------------------------------------------------------

class TestScoreGate(unittest.TestCase):

    def test_low_scores_need_rework(self):
        for score in range(1, 8):
            with self.subTest(score=score):
                text = f"Score: {score}\nThe hook is weak, suggest a stronger opening."
                self.assertEqual(score_gate(text), Verdict.NEEDS_REWORK)

    def test_high_scores_pass(self):
        for score in (8, 9, 10):
            with self.subTest(score=score):
                self.assertEqual(score_gate(f"Score: {score}. Strong hook."), Verdict.PASS)

    def test_score_ten_is_not_read_as_one(self):
        self.assertEqual(score_gate("Score: 10/10"), Verdict.PASS)

    def test_score_one_out_of_ten_needs_rework(self):
        self.assertEqual(score_gate("Score: 1/10"), Verdict.NEEDS_REWORK)

    def test_missing_marker_passes(self):
        self.assertEqual(score_gate("Great script, very shareable."), Verdict.PASS)

    def test_marker_is_case_sensitive(self):
        self.assertEqual(score_gate("score: 3"), Verdict.PASS)

    def test_marker_anywhere_in_text(self):
        text = "Overall this works.\n**Virality** Score: 6 because the ending drags."
        self.assertEqual(score_gate(text), Verdict.NEEDS_REWORK)

    def test_empty_text_passes(self):
        self.assertEqual(score_gate(""), Verdict.PASS)


# ---------------------------------------------------------------
# suggestion_gate
# ---------------------------------------------------------------

class TestSuggestionGate(unittest.TestCase):

    def test_keyword_in_any_case_needs_rework(self):
        for text in ("I suggest raising the music.", "SUGGESTIONS: trim intro", "Suggested fix: pacing"):
            with self.subTest(text=text):
                self.assertEqual(suggestion_gate(text), Verdict.NEEDS_REWORK)

    def test_no_keyword_passes(self):
        self.assertEqual(suggestion_gate("OK"), Verdict.PASS)
        self.assertEqual(suggestion_gate("Meets TikTok viral standards."), Verdict.PASS)

    def test_none_passes(self):
        self.assertEqual(suggestion_gate(None), Verdict.PASS)


if __name__ == "__main__":
    unittest.main()
