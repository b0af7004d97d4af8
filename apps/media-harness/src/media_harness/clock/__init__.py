"""
Simulated-time components.

Components:
- VirtualClock / RealClock: Clock implementations
- VirtualClockDriver: Deterministic fake event loop
- Waiter: Condition-versus-timeout race
- StatusFuture / delay: Settlement tracking and clock-aware sleeps
"""

from media_harness.clock.driver import VirtualClockDriver
from media_harness.clock.status import StatusFuture, delay, track_status
from media_harness.clock.virtual_clock import (
    Clock,
    ClockConfigurationError,
    RealClock,
    TimerHandle,
    VirtualClock,
)
from media_harness.clock.waiter import (
    PlaybackTarget,
    Waiter,
    WaiterTimeoutError,
    wait_for_end_or_timeout,
    wait_for_movement_or_fail_on_timeout,
    wait_until_playhead_reaches,
)

__all__ = [
    "VirtualClockDriver",
    "StatusFuture",
    "delay",
    "track_status",
    "Clock",
    "ClockConfigurationError",
    "RealClock",
    "TimerHandle",
    "VirtualClock",
    "PlaybackTarget",
    "Waiter",
    "WaiterTimeoutError",
    "wait_for_end_or_timeout",
    "wait_for_movement_or_fail_on_timeout",
    "wait_until_playhead_reaches",
]
