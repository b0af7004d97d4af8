"""
Pytest fixtures for media harness tests.

Includes fixtures for:
- Harness configuration
- Virtual clock and driver (fresh per test, never shared)
- Segment reference samples
- Markup samples
- Simulated playback target
"""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass

import pytest

from media_harness.clock import VirtualClock, VirtualClockDriver
from media_harness.config import HarnessConfig
from media_harness.logging_config import configure_focused_logging
from media_harness.models.segments import SegmentReference, make_reference


def pytest_configure(config: pytest.Config) -> None:
    """Apply LOG_LEVEL / LOG_FOCUS to the test session."""
    configure_focused_logging()


# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture
def harness_config() -> HarnessConfig:
    """Harness configuration with library defaults."""
    return HarnessConfig()


# =============================================================================
# Virtual Clock
# =============================================================================


@pytest.fixture
def virtual_clock(harness_config: HarnessConfig) -> Generator[VirtualClock, None, None]:
    """Installed virtual clock, uninstalled after the test."""
    with VirtualClock(microtask_limit=harness_config.microtask_limit) as clock:
        yield clock


@pytest.fixture
def clock_driver(virtual_clock: VirtualClock, harness_config: HarnessConfig) -> VirtualClockDriver:
    """Driver over the per-test virtual clock."""
    return VirtualClockDriver(virtual_clock, harness_config)


# =============================================================================
# Segment References
# =============================================================================


@pytest.fixture
def two_references() -> list[SegmentReference]:
    """Two contiguous 5-second segments starting at 0."""
    return [
        make_reference("s1.mp4", 0, 0, 5, base_uri="http://example.com/"),
        make_reference("s2.mp4", 1, 5, 10, base_uri="http://example.com/"),
    ]


@pytest.fixture
def offset_references() -> list[SegmentReference]:
    """Three 2-second segments whose timeline starts at 3 seconds."""
    return [
        make_reference("a.ts", 10, 3, 5, start_byte=0, end_byte=999),
        make_reference("b.ts", 11, 5, 7, start_byte=1000, end_byte=1999),
        make_reference("c.ts", 12, 7, 9, start_byte=2000, end_byte=None),
    ]


# =============================================================================
# Markup Samples
# =============================================================================


@pytest.fixture
def ttml_markup() -> str:
    """Small TTML-like document with nested elements and text."""
    return (
        '<tt xmlns="http://www.w3.org/ns/ttml" xml:lang="en">'
        "<head><styling>"
        '<style xml:id="s1" color="white" fontSize="16px"/>'
        "</styling></head>"
        '<body><div><p begin="00:00:01" end="00:00:02">Hello <span>world</span></p></div></body>'
        "</tt>"
    )


# =============================================================================
# Playback Target
# =============================================================================


@dataclass
class FakePlayhead:
    """Simulated media element: advances its playhead on clock timers."""

    clock: VirtualClock
    duration: float
    rate: float = 1.0
    current_time: float = 0.0
    ended: bool = False
    step: float = 0.25

    def play(self) -> None:
        self.clock.call_later(self.step, self._advance)

    def _advance(self) -> None:
        self.current_time = min(self.duration, self.current_time + self.step * self.rate)
        if self.current_time >= self.duration:
            self.ended = True
            return
        self.clock.call_later(self.step, self._advance)


@pytest.fixture
def playhead(virtual_clock: VirtualClock) -> FakePlayhead:
    """Paused 10-second playhead on the virtual clock."""
    return FakePlayhead(clock=virtual_clock, duration=10.0)
