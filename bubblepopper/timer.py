"""A timer that reports elapsed time normalised to its period."""

from __future__ import annotations

import math
import time
from enum import Enum
from typing import Callable

_EPOCH = time.monotonic()


def _monotonic_ms() -> float:
    return (time.monotonic() - _EPOCH) * 1000.0


class TimerType(Enum):
    """How a timer behaves once its period has elapsed."""

    ONCE = "once"
    LOOPING = "looping"
    PINGPONG = "pingpong"


class Timer:
    """Maps elapsed time onto [0.0, 1.0] relative to a period in seconds.

    ``clock`` returns the current time in milliseconds; converting the timer
    with ``float()`` updates and returns its normalised value.
    """

    def __init__(
        self,
        period: float = 1.0,
        kind: TimerType = TimerType.ONCE,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.period = period
        self.kind = kind
        self._clock = clock if clock is not None else _monotonic_ms
        self._value = 0.0
        self._time_start = 0.0
        self._running = False
        self._paused = False
        self._descending = False

    def _now(self) -> float:
        return self._clock() / 1000.0

    def start(self) -> None:
        """Start counting from the current time."""
        self._time_start = self._now()
        self._paused = False
        self._running = True

    def stop(self) -> None:
        """Stop counting; the last value is kept."""
        self._paused = False
        self._running = False

    def pause(self, paused: bool) -> None:
        """Pause or resume a running timer; has no effect on a stopped one."""
        if not self._running:
            return
        self._paused = paused
        if paused:
            return
        if self.kind is TimerType.PINGPONG:
            phase = 2.0 - self._value if self._descending else self._value
            self._time_start = self._now() - self.period * phase
        else:
            self._time_start = self._now() - self._value * self.period

    def is_running(self) -> bool:
        """Return True while the timer is counting."""
        return self._running

    def __float__(self) -> float:
        if self._running and not self._paused:
            elapsed = self._now() - self._time_start
            if self.kind is TimerType.ONCE:
                self._value = min(1.0, elapsed / self.period)
                if self._value == 1.0:
                    self._running = False
                    self._paused = False
            elif self.kind is TimerType.LOOPING:
                self._value = math.fmod(elapsed, self.period) / self.period
            else:
                value = math.fmod(elapsed, 2.0 * self.period) / self.period
                self._descending = value > 1.0
                self._value = value if value <= 1.0 else 2.0 - value
        return self._value