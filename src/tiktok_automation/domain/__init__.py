"""Domain models, errors and quality-gate strategies."""

from tiktok_automation.domain.errors import (
    CollaboratorError,
    ConfigurationError,
    EmptyResultError,
    PipelineError,
    StageFailure,
)
from tiktok_automation.domain.models import Artifact, Run, Stage, Verdict
from tiktok_automation.domain.quality import score_gate, suggestion_gate

__all__ = [
    "Artifact",
    "Run",
    "Stage",
    "Verdict",
    "PipelineError",
    "ConfigurationError",
    "CollaboratorError",
    "EmptyResultError",
    "StageFailure",
    "score_gate",
    "suggestion_gate",
]
