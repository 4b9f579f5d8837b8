"""
Quality-gate strategies: evaluator free text -> Verdict.

Both are plain functions so the pipeline can take any callable with the
same shape. The evaluator's reply has no structured score, so these only
look for literal markers in the text.
"""

import re

from tiktok_automation.domain.models import Verdict

# "Score: 1" .. "Score: 7"; "Score: 10" must not count as "Score: 1".
LOW_SCORE_PATTERN = re.compile(r"Score: [1-7](?!\d)")
SUGGESTION_KEYWORD = "suggest"


def score_gate(response_text: str) -> Verdict:
    """Script gate: needs rework when the reply carries a score of 1-7 out of 10."""
    if LOW_SCORE_PATTERN.search(response_text or ""):
        return Verdict.NEEDS_REWORK
    return Verdict.PASS


def suggestion_gate(response_text: str) -> Verdict:
    """Speech/final gate: any mention of 'suggest' (any case) means rework."""
    if SUGGESTION_KEYWORD in (response_text or "").lower():
        return Verdict.NEEDS_REWORK
    return Verdict.PASS
