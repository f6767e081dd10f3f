"""
Simulated progress for Ghostscript runs.

Ghostscript reports no machine-readable progress, so the percentage shown
while it works is advanced on a fixed timer and has no relation to how far
the engine actually is. It never passes the ceiling on its own and only
reaches 100 when :meth:`SimulatedProgress.finish` confirms success.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

_LOGGER = logging.getLogger("pdf_shrinker")

ProgressCallback = Callable[[float], None]


class SimulatedProgress:
    """Timer-driven progress counter reported through a callback."""

    def __init__(
        self,
        callback: Optional[ProgressCallback] = None,
        interval: float = 0.2,
        step: float = 5,
        ceiling: float = 99,
    ) -> None:
        self.callback = callback
        self.interval = interval
        self.step = step
        self.ceiling = ceiling
        self.percent: float = 0
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("Progress ticker already started")
        self._report()
        self._thread = threading.Thread(target=self._tick, name="pdf-shrinker-progress", daemon=True)
        self._thread.start()

    def _tick(self) -> None:
        while not self._stopped.wait(self.interval):
            if self.percent >= self.ceiling:
                continue
            self.percent = min(self.percent + self.step, self.ceiling)
            self._report()

    def _report(self) -> None:
        if self.callback is not None:
            self.callback(self.percent)

    def finish(self, success: bool) -> None:
        """Stop the ticker; jump to 100 only when *success* is true. Idempotent."""

        self._stopped.set()
        if self._thread is not None:
            self._thread.join()
        if success and self.percent != 100:
            self.percent = 100
            self._report()
        _LOGGER.debug("Progress stopped at %s%%", self.percent)
