"""
Unit tests for MatcherRegistry.
"""

from __future__ import annotations

import pytest

from media_harness.models.segments import make_reference
from media_harness.models.tree import parse_markup
from media_harness.verification import MatcherRegistry, MatchResult, create_default_registry


class TestMatcherRegistration:
    """Tests for registering matchers and testers."""

    def test_register_and_match(self) -> None:
        registry = MatcherRegistry()
        registry.register_matcher("to_be_even", lambda actual, _: MatchResult(actual % 2 == 0))

        assert registry.match("to_be_even", 4, None).passed is True
        assert registry.match("to_be_even", 3, None).passed is False
        assert registry.matcher_names == ["to_be_even"]

    def test_duplicate_matcher_rejected(self) -> None:
        registry = MatcherRegistry()
        registry.register_matcher("m", lambda a, e: MatchResult(True))

        with pytest.raises(ValueError, match="already registered"):
            registry.register_matcher("m", lambda a, e: MatchResult(True))

    def test_unknown_matcher(self) -> None:
        with pytest.raises(KeyError):
            MatcherRegistry().match("missing", 1, 1)

    def test_assert_match_raises_with_message(self) -> None:
        registry = MatcherRegistry()
        registry.register_matcher("never", lambda a, e: MatchResult(False, "nope"))

        with pytest.raises(AssertionError, match="nope"):
            registry.assert_match("never", 1, 2)


class TestEquals:
    """Tests for equality through testers."""

    def test_falls_back_to_eq(self) -> None:
        registry = MatcherRegistry()

        assert registry.equals(1, 1) is True
        assert registry.equals("a", "b") is False

    def test_first_applicable_tester_wins(self) -> None:
        """Test that testers returning None defer to the next one."""
        registry = MatcherRegistry()
        calls = []
        registry.register_equality_tester(lambda a, b: calls.append("first"))
        registry.register_equality_tester(lambda a, b: True)

        assert registry.equals(1, 2) is True
        assert calls == ["first"]

    def test_sequences_use_testers_elementwise(self) -> None:
        registry = MatcherRegistry()
        registry.register_equality_tester(
            lambda a, b: a.lower() == b.lower() if isinstance(a, str) and isinstance(b, str) else None
        )

        assert registry.equals(["A", "b"], ("a", "B")) is True
        assert registry.equals(["A"], ["a", "b"]) is False


class TestDefaultRegistry:
    """Tests for create_default_registry()."""

    def test_reference_tester_installed(self) -> None:
        registry = create_default_registry()

        assert registry.equals(make_reference("a", 0, 0, 1), make_reference("a", 0, 0, 1))
        assert not registry.equals(make_reference("a", 0, 0, 1), make_reference("b", 0, 0, 1))

    def test_element_matcher_installed(self) -> None:
        registry = create_default_registry()

        assert registry.match("to_equal_element", parse_markup("<a/>"), parse_markup("<a/>")).passed
        with pytest.raises(AssertionError, match="Different tagName"):
            registry.assert_match("to_equal_element", parse_markup("<a/>"), parse_markup("<b/>"))
