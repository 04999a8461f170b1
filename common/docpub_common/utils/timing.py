"""
Timing utilities for span logs and latency histograms.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional


@dataclass
class Timer:
    started: float
    stopped: Optional[float] = None

    def stop(self) -> float:
        """Freeze the timer and return elapsed milliseconds."""
        if self.stopped is None:
            self.stopped = time.perf_counter()
        return self.elapsed_ms

    @property
    def elapsed_ms(self) -> float:
        end = self.stopped if self.stopped is not None else time.perf_counter()
        return round((end - self.started) * 1000.0, 2)


def start_timer() -> Timer:
    """Return a started Timer instance."""
    return Timer(started=time.perf_counter())
