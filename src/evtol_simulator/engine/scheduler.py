"""Virtual-time scheduler — paces fixed-size ticks against the wall clock.

Tick ``k`` (0-indexed) covers virtual time ``[k × step, (k+1) × step]`` and
is due ``k × step / compression`` wall-clock ms after ``start()``.  The run
ends once ``total / compression`` wall-clock ms have elapsed.

Pacing rules:
  - a tick never fires before its deadline
  - at most one tick fires per loop iteration, after which the clock is
    re-sampled; a starved host catches up by firing back-to-back
  - ticks are never skipped or merged, so virtual timestamps are always
    exact multiples of the step size
  - between deadlines the loop sleeps until the next deadline (capped at
    the stop time) rather than spinning

The wall clock is read in integer nanoseconds.
"""

from __future__ import annotations

import time
from collections.abc import Callable

TickHandler = Callable[[int, int], None]

_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000


class SimulationScheduler:
    """Drives a tick handler for a fixed amount of virtual time.

    Usage::

        scheduler = SimulationScheduler(1000, handler, total_minutes=180,
                                        time_compression=60)
        ticks = scheduler.start()   # returns after ~3 real minutes

    Parameters
    ----------
    timestep_ms : int
        Virtual tick size (ms).  Must be > 0.
    handler : Callable[[int, int], None]
        Called once per tick with ``(prev_ms, cur_ms)``.
    total_minutes : float
        Virtual duration of the run (minutes).  Must be >= 0.
    time_compression : float
        Virtual ms per wall-clock ms.  Must be > 0.
    clock : Callable[[], int]
        Monotonic wall clock in nanoseconds.
    sleep : Callable[[float], None]
        Blocks for the given number of seconds.
    """

    def __init__(
        self,
        timestep_ms: int,
        handler: TickHandler,
        total_minutes: float,
        time_compression: float = 1.0,
        *,
        clock: Callable[[], int] = time.monotonic_ns,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if timestep_ms <= 0:
            raise ValueError("timestep_ms must be greater than 0.")
        if handler is None or not callable(handler):
            raise TypeError("handler must be a callable taking (prev_ms, cur_ms).")
        if total_minutes < 0:
            raise ValueError("total_minutes must not be negative.")
        if time_compression <= 0:
            raise ValueError("time_compression must be greater than 0.")

        self._timestep_ms = timestep_ms
        self._handler = handler
        self._total_minutes = total_minutes
        self._time_compression = time_compression
        self._clock = clock
        self._sleep = sleep
        self._stop_requested = False

    @property
    def timestep_ms(self) -> int:
        return self._timestep_ms

    @property
    def total_virtual_ms(self) -> float:
        return self._total_minutes * 60_000

    @property
    def real_duration_minutes(self) -> float:
        """Expected wall-clock length of a full run."""
        return self._total_minutes / self._time_compression

    def stop(self) -> None:
        """Ask a running ``start()`` to return before its next tick."""
        self._stop_requested = True

    def start(self) -> int:
        """Run to completion and return the number of ticks fired."""
        self._stop_requested = False

        step_ns = self._timestep_ms * _NS_PER_MS / self._time_compression
        total_virtual_ms = self.total_virtual_ms

        started = self._clock()
        stop_at = started + total_virtual_ms * _NS_PER_MS / self._time_compression
        count = 0
        next_due = started

        now = started
        while now < stop_at and not self._stop_requested:
            exhausted = count * self._timestep_ms >= total_virtual_ms
            if now >= next_due and not exhausted:
                prev_ms = count * self._timestep_ms
                count += 1
                self._handler(prev_ms, count * self._timestep_ms)
                next_due = started + count * step_ns
            else:
                wake_at = stop_at if exhausted else min(next_due, stop_at)
                if wake_at > now:
                    self._sleep((wake_at - now) / _NS_PER_S)
            now = self._clock()

        return count
