"""
Fixed-interval trigger loop. Runs are strictly sequential: the next trigger
waits for the previous run to finish, so a run stuck in a rework loop
delays every later trigger.
"""

import time
from datetime import datetime
from typing import Callable, Optional

from tiktok_automation.application.pipeline import ShortVideoPipeline
from tiktok_automation.domain.errors import PipelineError
from tiktok_automation.domain.models import Run


class Scheduler:
    """Starts a pipeline run, sleeps for the interval, repeats."""

    def __init__(
        self,
        pipeline: ShortVideoPipeline,
        interval_seconds: float,
        topic: Optional[str] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._pipeline = pipeline
        self._interval = interval_seconds
        self._topic = topic
        self._sleep = sleep
        self._clock = clock

    def run_once(self) -> Optional[Run]:
        """One triggered run. A failed run is reported and returns None."""
        print("🚀 Starting video creation automation flow...")
        print(f"⏰ Scheduled trigger activated at {self._clock().strftime('%Y-%m-%d %H:%M:%S')}")
        try:
            return self._pipeline.run(self._topic)
        except PipelineError as e:
            print(f"\n❌ Run failed: {e}")
            return None

    def run_forever(self, max_runs: Optional[int] = None) -> int:
        """
        Trigger runs back to back with a sleep in between. A failed run does not
        stop the loop. Returns the number of completed runs (max_runs bounds the loop).
        """
        completed = 0
        runs = 0
        while max_runs is None or runs < max_runs:
            runs += 1
            if self.run_once() is not None:
                completed += 1
            hours = self._interval / 3600
            print(f"\n😴 Sleeping {hours:g}h until the next trigger...")
            self._sleep(self._interval)
        return completed
