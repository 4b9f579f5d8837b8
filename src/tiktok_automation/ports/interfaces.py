"""
Port interfaces (SOLID – Dependency Inversion).
Implement these in adapters; the application layer depends only on these abstractions.
Every method performs one network call and either returns a parsed result or
raises CollaboratorError / EmptyResultError. None of them retry.
"""

from abc import ABC, abstractmethod

from tiktok_automation.domain.models import Artifact


class ITextGenerator(ABC):
    """Generative text: script writing and, with an evaluation prompt, quality review."""

    @abstractmethod
    def generate(self, prompt: str, temperature: float, max_output_tokens: int) -> str:
        """Return the first fragment of the first candidate."""
        pass


class ISpeechSynthesizer(ABC):
    """Text-to-speech."""

    @abstractmethod
    def synthesize(self, text: str) -> Artifact:
        """Vocalize text; return audio by reference or by value."""
        pass


class IAssetStore(ABC):
    """Storage for the raw video input and the finished output."""

    @abstractmethod
    def fetch_video(self, file_id: str) -> Artifact:
        """Return a handle to a stored raw video usable by the merger."""
        pass

    @abstractmethod
    def persist(self, artifact: Artifact, folder_id: str, file_name: str) -> str:
        """Store the merged video; return the stored name."""
        pass


class IMediaMerger(ABC):
    """Combine audio and video into one artifact."""

    @abstractmethod
    def merge(self, audio: Artifact, video: Artifact, start_offset: int = 0) -> Artifact:
        """Merge; return the merged output reference."""
        pass
