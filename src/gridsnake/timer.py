# timer.py
from typing import Optional


class TickTimer:
    """
    Fixed-period tick source gated on millisecond timestamps.

    The owner calls ``poll(now_ms)`` once per frame and runs one simulation
    step whenever it returns True. A stopped or paused timer never fires, so
    cancelling is just ``stop()``.
    """

    def __init__(self):
        self.period_ms = 0
        self.last_tick: Optional[int] = None
        self._paused_elapsed: Optional[int] = None

    @property
    def running(self) -> bool:
        return self.last_tick is not None and self._paused_elapsed is None

    @property
    def paused(self) -> bool:
        return self._paused_elapsed is not None

    def start(self, now_ms: int, period_ms: int) -> None:
        self.period_ms = period_ms
        self.last_tick = now_ms
        self._paused_elapsed = None

    def set_period(self, period_ms: int) -> None:
        """Change the interval without losing the phase of the current tick."""
        self.period_ms = period_ms
        if self._paused_elapsed is not None:
            self._paused_elapsed = min(self._paused_elapsed, period_ms)

    def stop(self) -> None:
        self.last_tick = None
        self._paused_elapsed = None

    def pause(self, now_ms: int) -> None:
        if not self.running:
            return
        self._paused_elapsed = min(now_ms - self.last_tick, self.period_ms)

    def resume(self, now_ms: int) -> None:
        """Pick up at the same point inside the current period."""
        if not self.paused:
            return
        self.last_tick = now_ms - self._paused_elapsed
        self._paused_elapsed = None

    def poll(self, now_ms: int) -> bool:
        if not self.running:
            return False
        if now_ms - self.last_tick < self.period_ms:
            return False  # not time to move yet
        if now_ms - self.last_tick >= 2 * self.period_ms:
            # fell behind (window drag, debugger); re-anchor instead of bursting
            self.last_tick = now_ms
        else:
            self.last_tick += self.period_ms
        return True

    def elapsed(self, now_ms: int) -> int:
        """Milliseconds since the last tick; frozen while paused, 0 when stopped."""
        if self._paused_elapsed is not None:
            return self._paused_elapsed
        if self.last_tick is None:
            return 0
        return max(0, now_ms - self.last_tick)
