"""
Virtual clock driver.

Fakes an event loop on top of a VirtualClock. Each step drains pending
asynchronous work for a fixed number of rounds, calls the optional tick
callback, then advances simulated time by one step and drains again with the
same number of rounds, so work due at the final step has settled when
run_for returns.

A cascade of chained awaits needs one round per link, so the round count is
a safety margin rather than a derived bound.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable

from media_harness.clock.virtual_clock import ClockConfigurationError, VirtualClock
from media_harness.config import HarnessConfig

logger = logging.getLogger(__name__)

# Receives the step index (whole seconds at the default step); may be sync or async
TickCallback = Callable[[int], "Awaitable[None] | None"]


class VirtualClockDriver:
    """Drives simulated time deterministically.

    Attributes:
        clock: Virtual clock advanced by the driver
        flush_rounds: Drain rounds before each step
        tick_seconds: Simulated seconds per step
    """

    def __init__(self, clock: VirtualClock, config: HarnessConfig | None = None) -> None:
        """Initialize the driver.

        Args:
            clock: Clock to advance; must be a VirtualClock
            config: Harness configuration (defaults from environment)
        """
        config = config or HarnessConfig()
        self.clock = clock
        self.flush_rounds = config.flush_rounds
        self.tick_seconds = config.tick_seconds

    def _ensure_virtual(self) -> None:
        if not isinstance(self.clock, VirtualClock):
            raise ClockConfigurationError(
                f"Expected a VirtualClock, got {type(self.clock).__name__}; "
                "real timers cannot be driven deterministically"
            )
        if not self.clock.installed:
            raise ClockConfigurationError(
                "VirtualClock is not installed; real timers would be used"
            )

    async def flush(self) -> None:
        """Drain clock callbacks and let the event loop run ready tasks once."""
        self.clock.flush()
        await asyncio.sleep(0)

    async def _drain(self) -> None:
        for _ in range(self.flush_rounds):
            self.clock.tick(0)
            await self.flush()

    async def run_for(self, duration: float, on_tick: TickCallback | None = None) -> None:
        """Simulate ``duration`` seconds of elapsed time.

        Args:
            duration: Simulated seconds to run
            on_tick: Called with the step index just before each step. The
                index counts steps, not seconds; it equals the elapsed whole
                seconds only when tick_seconds is 1.

        Raises:
            ClockConfigurationError: If the clock is not an installed VirtualClock
        """
        self._ensure_virtual()

        start = self.clock.now()
        logger.info(f"SIM RUN start: duration={duration}s at t={start:.3f}s")

        step = 0
        while step * self.tick_seconds < duration:
            await self._drain()

            if on_tick is not None:
                result = on_tick(step)
                if inspect.isawaitable(result):
                    await result

            self.clock.tick(self.tick_seconds)
            await self._drain()

            logger.debug(f"SIM STEP {step}: t={self.clock.now():.3f}s")
            step += 1

        logger.info(
            f"SIM RUN done: {step} steps, advanced {self.clock.now() - start:.3f}s"
        )
