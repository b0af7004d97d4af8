"""
Clock abstractions for deterministic asynchronous tests.

Code that schedules deferred work receives a Clock object instead of calling
the event loop directly. In production (or real-time tests) that is a
RealClock over the running asyncio loop; in simulated-time tests it is a
VirtualClock whose time only moves when tick() is called.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class ClockConfigurationError(RuntimeError):
    """Raised when simulated time is used without an installed virtual clock."""

    pass


@runtime_checkable
class Cancellable(Protocol):
    def cancel(self) -> None: ...


@runtime_checkable
class Clock(Protocol):
    """Protocol implemented by clock providers."""

    def now(self) -> float:
        """Return the current time in seconds."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> Cancellable:
        """Run ``callback(*args)`` after ``delay`` seconds."""

    async def sleep(self, seconds: float) -> None:
        """Suspend the calling task for ``seconds``."""


class RealClock:
    """Clock backed by the running asyncio event loop."""

    def now(self) -> float:
        return asyncio.get_running_loop().time()

    def call_later(
        self, delay: float, callback: Callable[..., Any], *args: Any
    ) -> asyncio.TimerHandle:
        return asyncio.get_running_loop().call_later(delay, callback, *args)

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)


@dataclass
class TimerHandle:
    """Pending virtual timer.

    Attributes:
        when: Simulated fire time in seconds.
        sequence: Insertion order, breaks ties between equal fire times.
        callback: Function invoked when the timer fires.
        args: Positional arguments for callback.
        cancelled: True once cancel() has been called.
    """

    when: float
    sequence: int
    callback: Callable[..., Any]
    args: tuple[Any, ...] = ()
    cancelled: bool = field(default=False, init=False)

    def cancel(self) -> None:
        self.cancelled = True

    def __lt__(self, other: TimerHandle) -> bool:
        return (self.when, self.sequence) < (other.when, other.sequence)


class VirtualClock:
    """Manually advanced clock for simulated-time tests.

    Time advances only through tick(). Timers fire in (time, insertion)
    order and never before their fire time. Microtask-like callbacks queued
    with call_soon() run whenever the clock is flushed.

    Attributes:
        microtask_limit: Maximum callbacks a single flush() may run
        _now: Current simulated time in seconds
        _timers: Heap of pending TimerHandle objects
        _microtasks: Queue of pending (callback, args) pairs
        _installed: True while the clock owns time for the current test
    """

    DEFAULT_MICROTASK_LIMIT = 10_000

    def __init__(self, start: float = 0.0, microtask_limit: int = DEFAULT_MICROTASK_LIMIT) -> None:
        self.microtask_limit = microtask_limit
        self._start = start
        self._now = start
        self._timers: list[TimerHandle] = []
        self._microtasks: deque[tuple[Callable[..., Any], tuple[Any, ...]]] = deque()
        self._sequence = itertools.count()
        self._installed = False

    # -- lifecycle ---------------------------------------------------------

    def install(self) -> VirtualClock:
        """Take ownership of time for the current test."""
        self._installed = True
        return self

    def uninstall(self) -> None:
        """Release ownership and drop any pending work."""
        self._installed = False
        self.reset()

    @property
    def installed(self) -> bool:
        return self._installed

    def __enter__(self) -> VirtualClock:
        return self.install()

    def __exit__(self, *exc_info: Any) -> None:
        self.uninstall()

    def reset(self) -> None:
        """Return to the start time and drop all pending timers and callbacks."""
        dropped = self.pending_timers + self.pending_callbacks
        self._now = self._start
        self._timers.clear()
        self._microtasks.clear()
        logger.debug(f"Clock reset: dropped {dropped} pending callbacks")

    # -- scheduling --------------------------------------------------------

    def now(self) -> float:
        return self._now

    def call_at(self, when: float, callback: Callable[..., Any], *args: Any) -> TimerHandle:
        """Schedule ``callback(*args)`` at simulated time ``when``."""
        handle = TimerHandle(
            when=max(when, self._now),
            sequence=next(self._sequence),
            callback=callback,
            args=args,
        )
        heapq.heappush(self._timers, handle)
        return handle

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle:
        """Schedule ``callback(*args)`` ``delay`` simulated seconds from now."""
        return self.call_at(self._now + max(delay, 0.0), callback, *args)

    def call_soon(self, callback: Callable[..., Any], *args: Any) -> None:
        """Queue a microtask-like callback for the next flush."""
        self._microtasks.append((callback, args))

    @property
    def pending_timers(self) -> int:
        return sum(1 for handle in self._timers if not handle.cancelled)

    @property
    def pending_callbacks(self) -> int:
        return len(self._microtasks)

    # -- advancing time ----------------------------------------------------

    def flush(self) -> int:
        """Run queued callbacks, including ones they queue, until none remain.

        Returns:
            Number of callbacks run

        Raises:
            RuntimeError: If more than microtask_limit callbacks run
        """
        ran = 0
        while self._microtasks:
            if ran >= self.microtask_limit:
                raise RuntimeError(
                    f"Flush did not settle after {self.microtask_limit} callbacks. "
                    "Code under test is probably rescheduling itself forever."
                )
            callback, args = self._microtasks.popleft()
            callback(*args)
            ran += 1
        return ran

    def tick(self, seconds: float) -> None:
        """Advance simulated time, firing every timer due in the window.

        Timers scheduled by callbacks during the tick fire too when they fall
        inside the window. Queued callbacks are flushed after each timer.

        Raises:
            ClockConfigurationError: If the clock is not installed
            ValueError: If seconds is negative
        """
        if not self._installed:
            raise ClockConfigurationError(
                "VirtualClock is not installed; call install() before tick()"
            )
        if seconds < 0:
            raise ValueError("seconds must be non-negative")

        target = self._now + seconds
        while self._timers and self._timers[0].when <= target:
            handle = heapq.heappop(self._timers)
            if handle.cancelled:
                continue
            self._now = handle.when
            logger.debug(f"Timer fired at {handle.when:.3f}s")
            handle.callback(*handle.args)
            self.flush()

        self._now = target

    async def sleep(self, seconds: float) -> None:
        """Suspend the calling task until simulated time has advanced by ``seconds``."""
        future = asyncio.get_running_loop().create_future()

        def wake() -> None:
            if not future.done():
                future.set_result(None)

        handle = self.call_later(seconds, wake)
        try:
            await future
        finally:
            handle.cancel()
