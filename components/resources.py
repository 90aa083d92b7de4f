"""components.resources — World-level singletons (not per-entity)."""

from __future__ import annotations
import math
from dataclasses import dataclass


@dataclass
class GameClock:
    """Monotonic session time — accumulated ``dt`` since session start.

    Used as the single source of truth for message timestamps and
    expiry.  Also drives the fixed-period maintenance tick: ``advance``
    reports how many whole periods elapsed during the frame so the
    caller can run periodic work (message pruning) at 1 Hz regardless
    of frame rate.

    ``stop()`` cancels the maintenance tick for good; the frame loop
    calls it when the session ends.
    """
    time: float = 0.0                # s
    period: float = 1.0              # s
    since_tick: float = 0.0          # s, time accumulated toward the next tick
    running: bool = True

    def advance(self, dt: float) -> int:
        """Add *dt* seconds; return the number of maintenance ticks due.

        A negative or non-finite *dt* raises ``ValueError`` and leaves the
        clock untouched.
        """
        if not math.isfinite(dt) or dt < 0:
            raise ValueError(f"frame delta must be finite and >= 0, got {dt}")
        if not self.running:
            return 0
        self.time += dt
        self.since_tick += dt
        ticks = 0
        while self.since_tick >= self.period:
            self.since_tick -= self.period
            ticks += 1
        return ticks

    def stop(self) -> None:
        self.running = False
        self.since_tick = 0.0


@dataclass
class Session:
    """Per-session identity of the local user."""
    handle: str = "Anonymous"
