"""Ports (interfaces) – depend on these, implement in adapters."""

from tiktok_automation.ports.interfaces import (
    ITextGenerator,
    ISpeechSynthesizer,
    IAssetStore,
    IMediaMerger,
)

__all__ = [
    "ITextGenerator",
    "ISpeechSynthesizer",
    "IAssetStore",
    "IMediaMerger",
]
