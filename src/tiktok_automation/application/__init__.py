"""Application layer – pipeline orchestration and scheduling."""

from tiktok_automation.application.pipeline import ShortVideoPipeline
from tiktok_automation.application.scheduler import Scheduler

__all__ = ["ShortVideoPipeline", "Scheduler"]
