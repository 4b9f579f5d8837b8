"""Error taxonomy. Quality-gate rework is control flow, not an error."""

from typing import Optional


class PipelineError(Exception):
    """Base class for everything that ends a run or the process."""


class ConfigurationError(PipelineError):
    """Required settings are missing, still placeholders, or unparsable."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Missing, placeholder or invalid settings: {', '.join(self.missing)}")


class CollaboratorError(PipelineError):
    """Transport or protocol failure talking to a remote service."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class EmptyResultError(CollaboratorError):
    """Reply parsed, but carried no usable candidate, fragment or reference."""


class StageFailure(PipelineError):
    """A stage's collaborator call failed; the run stops here."""

    def __init__(self, stage, cause: Exception):
        self.stage = stage
        self.cause = cause
        name = getattr(stage, "value", stage)
        super().__init__(f"{name} failed: {cause}")
