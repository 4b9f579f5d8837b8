"""
TikTok Automation – scheduled pipeline for short narrated TikTok videos.

Use from project root (installed, or with `src` on path):
  from tiktok_automation.application.pipeline import ShortVideoPipeline
  from tiktok_automation.adapters import default_adapters
  pipeline = ShortVideoPipeline(**default_adapters())
  pipeline.run("artificial intelligence")

Collaborators (Gemini, ElevenLabs, Google Drive, merge service) sit behind
ports; inject fakes or alternative services through default_adapters(**overrides).
"""

__version__ = "0.3.0"
