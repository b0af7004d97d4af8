"""
Unit tests for the WaitRace state machine.
"""

from __future__ import annotations

from media_harness.models.state import WaitRace


class TestWaitRace:
    """Tests for single terminal transition."""

    def test_starts_pending(self) -> None:
        race = WaitRace("anything")

        assert race.state == "pending"
        assert race.is_pending is True

    def test_resolve_wins(self) -> None:
        race = WaitRace("x")

        assert race.resolve() is True
        assert race.time_out() is False
        assert race.state == "resolved"

    def test_timeout_wins(self) -> None:
        race = WaitRace("x")

        assert race.time_out() is True
        assert race.resolve() is False
        assert race.state == "timed_out"

    def test_repeated_transition_ignored(self) -> None:
        race = WaitRace("x")
        race.resolve()

        assert race.resolve() is False
        assert race.is_pending is False
