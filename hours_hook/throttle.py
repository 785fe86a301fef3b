"""
Throttle gate for activity emissions.

Decides, for a stream of event timestamps, which events are far enough apart to be
worth recording. The gate never performs I/O; callers act on a ``True`` result.
"""

import math
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

DEFAULT_INTERVAL = 2.0


@dataclass
class ThrottleState:
    """Deadline record owned by a single ThrottleGate; only the gate mutates it."""

    interval: float
    next_allowed_time: float = field(default=-math.inf)


class ThrottleGate:
    """
    Stateful predicate answering "should an emission fire now?".

    Not thread-safe: callers that receive events on several threads must serialize
    calls to :meth:`evaluate`.
    """

    def __init__(
        self,
        interval: float = DEFAULT_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Parameters
        ----------
        interval : float
            Minimum spacing between two passing events, in the clock's unit.
        clock : callable
            Time source used when :meth:`evaluate` is called without ``now``.
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval!r}")
        self._state = ThrottleState(interval=interval)
        self._clock = clock

    @property
    def interval(self) -> float:
        return self._state.interval

    @property
    def next_allowed_time(self) -> float:
        return self._state.next_allowed_time

    def evaluate(self, now: Optional[float] = None) -> bool:
        """Return True and advance the deadline if ``now`` is strictly past it."""
        if now is None:
            now = self._clock()
        # strict: an event landing exactly on the deadline is suppressed
        if now > self._state.next_allowed_time:
            self._state.next_allowed_time = now + self._state.interval
            return True
        return False
