"""Domain models – one Run, its artifacts and gate verdicts."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Stage(str, Enum):
    """Pipeline stages; each one calls exactly one collaborator."""
    GENERATE_SCRIPT = "generate_script"
    EVALUATE_SCRIPT = "evaluate_script"
    SYNTHESIZE_SPEECH = "synthesize_speech"
    EVALUATE_SPEECH = "evaluate_speech"
    FETCH_RAW_VIDEO = "fetch_raw_video"
    MERGE_AUDIO_VIDEO = "merge_audio_video"
    EVALUATE_FINAL = "evaluate_final"
    PERSIST_OUTPUT = "persist_output"


class Verdict(str, Enum):
    """Outcome of a quality gate."""
    PASS = "pass"
    NEEDS_REWORK = "needs_rework"


@dataclass(frozen=True)
class Artifact:
    """
    Opaque handle to audio/video/merged media.
    Exactly one of url (by reference) or data (by value) is set.
    """
    url: Optional[str] = None
    data: Optional[bytes] = None
    mime_type: Optional[str] = None

    def __post_init__(self):
        if (self.url is None) == (self.data is None):
            raise ValueError("Artifact needs exactly one of url or data")

    @classmethod
    def by_reference(cls, url: str, mime_type: Optional[str] = None) -> "Artifact":
        return cls(url=url, mime_type=mime_type)

    @classmethod
    def by_value(cls, data: bytes, mime_type: Optional[str] = None) -> "Artifact":
        return cls(data=data, mime_type=mime_type)

    @property
    def is_reference(self) -> bool:
        return self.url is not None

    def describe(self) -> str:
        """Text form used in log lines and evaluator prompts."""
        if self.url is not None:
            return self.url
        kind = self.mime_type or "media"
        return f"<inline {kind}, {len(self.data)} bytes>"


@dataclass
class Run:
    """
    One execution of the pipeline. Mutated in place stage by stage and
    discarded when the run ends; nothing here is persisted.
    """
    topic: str
    script: Optional[str] = None
    audio: Optional[Artifact] = None
    video: Optional[Artifact] = None
    merged: Optional[Artifact] = None
    output_name: Optional[str] = None
    stored_name: Optional[str] = None
    script_attempts: int = 0
    restarts: int = 0
    critiques: dict = field(default_factory=dict)

    def discard_artifacts(self) -> None:
        """Drop every intermediate artifact before restarting from the script stage."""
        self.script = None
        self.audio = None
        self.video = None
        self.merged = None
        self.output_name = None
