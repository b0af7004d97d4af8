"""
Status tracking for awaitables and clock-aware delays.

Simulated-time tests advance the clock and then inspect whether an
operation has settled, without awaiting it (awaiting would block until it
settles). StatusFuture exposes that as a plain attribute.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Generator
from typing import Any, Literal

from media_harness.clock.virtual_clock import Clock, RealClock

FutureStatus = Literal["pending", "resolved", "rejected"]


class StatusFuture:
    """Wraps an awaitable and records whether it is pending, resolved or rejected.

    Attributes:
        future: Underlying task or future
        status: Current status, updated when the future completes
    """

    def __init__(self, awaitable: Awaitable[Any]) -> None:
        self.future = asyncio.ensure_future(awaitable)
        self.status: FutureStatus = "pending"
        self.future.add_done_callback(self._on_done)

    def _on_done(self, future: asyncio.Future) -> None:
        if future.cancelled() or future.exception() is not None:
            self.status = "rejected"
        else:
            self.status = "resolved"

    def __await__(self) -> Generator[Any, None, Any]:
        return self.future.__await__()


def track_status(awaitable: Awaitable[Any]) -> StatusFuture:
    """Schedule ``awaitable`` and return a StatusFuture for it."""
    return StatusFuture(awaitable)


async def delay(seconds: float, clock: Clock | None = None) -> None:
    """Wait ``seconds`` on ``clock`` (the real event loop clock by default)."""
    await (clock or RealClock()).sleep(seconds)
