"""
Waiter: races an awaited condition against an optional timeout.

Both branches are scheduled on a Clock, so the same waiter works against
real time and against a VirtualClock driven by VirtualClockDriver.

Timeout policies:
- fail_on_timeout(True): the wait raises WaiterTimeoutError
- default: the timeout counts as a successful resolution
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from media_harness.clock.virtual_clock import Cancellable, Clock, RealClock
from media_harness.config import HarnessConfig
from media_harness.models.state import WaitRace

logger = logging.getLogger(__name__)


class WaiterTimeoutError(TimeoutError):
    """Raised when a fail-on-timeout wait reaches its deadline."""

    pass


@runtime_checkable
class PlaybackTarget(Protocol):
    """Anything with a playhead, e.g. a simulated media element."""

    current_time: float
    ended: bool


class Waiter:
    """Waits for a playback condition with an optional deadline.

    Usage:
        waiter = Waiter(clock).timeout_after(10).fail_on_timeout(True)
        await waiter.wait_until_reaches(player, 5.0)

    Attributes:
        clock: Clock used for polling and the deadline
        poll_interval: Seconds between condition checks
        _timeout: Deadline in seconds, or None to wait indefinitely
        _fail_on_timeout: Whether reaching the deadline is an error
    """

    def __init__(self, clock: Clock | None = None, config: HarnessConfig | None = None) -> None:
        config = config or HarnessConfig()
        self.clock = clock or RealClock()
        self.poll_interval = config.poll_interval_s
        self._timeout: float | None = None
        self._fail_on_timeout = False

    def timeout_after(self, seconds: float) -> Waiter:
        """Set the deadline in seconds."""
        self._timeout = seconds
        return self

    def fail_on_timeout(self, fail: bool = True) -> Waiter:
        """Choose whether reaching the deadline raises WaiterTimeoutError."""
        self._fail_on_timeout = fail
        return self

    async def wait_for_movement(self, target: PlaybackTarget) -> None:
        """Wait for the playhead to move forward from its current position."""
        initial_time = target.current_time
        await self.wait_until(
            lambda: target.current_time > initial_time,
            f"movement from {initial_time:.2f}s",
        )

    async def wait_until_reaches(self, target: PlaybackTarget, time: float) -> None:
        """Wait for the playhead to reach or pass ``time``."""
        await self.wait_until(
            lambda: target.current_time >= time,
            f"playhead to reach {time:.2f}s",
        )

    async def wait_for_end(self, target: PlaybackTarget) -> None:
        """Wait for playback to end."""
        await self.wait_until(lambda: target.ended, "end of playback")

    async def wait_until(self, condition: Callable[[], bool], description: str) -> None:
        """Wait for ``condition()`` to become true or the deadline, whichever is first.

        Args:
            condition: Polled on the clock every poll_interval seconds
            description: What is being waited for, for logs and errors

        Raises:
            WaiterTimeoutError: If the deadline wins and fail_on_timeout is set
        """
        future = asyncio.get_running_loop().create_future()
        race = WaitRace(description)
        handles: dict[str, Cancellable] = {}

        def check() -> None:
            if not race.is_pending:
                return
            if condition():
                if race.resolve():
                    logger.debug(f"WAIT RESOLVED: {description}")
                    future.set_result(None)
                return
            handles["poll"] = self.clock.call_later(self.poll_interval, check)

        def on_timeout() -> None:
            if not race.time_out():
                return
            if self._fail_on_timeout:
                logger.warning(f"WAIT TIMEOUT: {description} after {self._timeout}s")
                future.set_exception(
                    WaiterTimeoutError(
                        f"Timeout waiting for {description} after {self._timeout}s"
                    )
                )
            else:
                logger.debug(f"WAIT TIMEOUT (accepted): {description}")
                future.set_result(None)

        logger.debug(f"WAIT START: {description}, timeout={self._timeout}")
        check()
        if race.is_pending and self._timeout is not None:
            handles["timeout"] = self.clock.call_later(self._timeout, on_timeout)

        try:
            await future
        finally:
            # Discard whichever branch lost the race
            for handle in handles.values():
                handle.cancel()


def wait_for_movement_or_fail_on_timeout(
    target: PlaybackTarget, timeout: float, clock: Clock | None = None
):
    """Wait for the playhead to move; fail if ``timeout`` seconds pass first."""
    waiter = Waiter(clock).timeout_after(timeout).fail_on_timeout(True)
    return waiter.wait_for_movement(target)


def wait_until_playhead_reaches(
    target: PlaybackTarget, time: float, timeout: float, clock: Clock | None = None
):
    """Wait for the playhead to reach ``time``; fail if ``timeout`` seconds pass first."""
    waiter = Waiter(clock).timeout_after(timeout).fail_on_timeout(True)
    return waiter.wait_until_reaches(target, time)


def wait_for_end_or_timeout(target: PlaybackTarget, timeout: float, clock: Clock | None = None):
    """Wait for playback to end or ``timeout`` seconds, whichever occurs first."""
    waiter = Waiter(clock).timeout_after(timeout)
    return waiter.wait_for_end(target)
