"""
Pluggable matcher registry.

Verification checks report a pass/fail flag plus a message. The registry
lets any test runner mount them: named matchers compare an actual value to
an expected one, and equality testers override equality for the types they
understand.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a matcher.

    Attributes:
        passed: Whether actual matched expected.
        message: Explanation, used as failure text when not passed.
    """

    passed: bool
    message: str = ""


Matcher = Callable[[Any, Any], MatchResult]
# Returns None when the tester does not apply to the pair
EqualityTester = Callable[[Any, Any], "bool | None"]


class MatcherRegistry:
    """Registry of named matchers and custom equality testers."""

    def __init__(self) -> None:
        self._matchers: dict[str, Matcher] = {}
        self._equality_testers: list[EqualityTester] = []

    def register_matcher(self, name: str, matcher: Matcher) -> None:
        """Register a named matcher.

        Raises:
            ValueError: If a matcher with this name already exists
        """
        if name in self._matchers:
            raise ValueError(f"Matcher already registered: {name}")
        self._matchers[name] = matcher
        logger.debug(f"Registered matcher: {name}")

    def register_equality_tester(self, tester: EqualityTester) -> None:
        """Register a custom equality tester (consulted in registration order)."""
        self._equality_testers.append(tester)

    @property
    def matcher_names(self) -> list[str]:
        return sorted(self._matchers)

    def equals(self, a: Any, b: Any) -> bool:
        """Compare two values through the registered equality testers.

        The first tester returning a bool decides. Lists and tuples are
        compared element-wise; anything else falls back to ``==``.
        """
        for tester in self._equality_testers:
            result = tester(a, b)
            if result is not None:
                return result

        if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
            return len(a) == len(b) and all(self.equals(x, y) for x, y in zip(a, b))

        return a == b

    def match(self, name: str, actual: Any, expected: Any) -> MatchResult:
        """Run a named matcher.

        Raises:
            KeyError: If no matcher is registered under ``name``
        """
        if name not in self._matchers:
            raise KeyError(f"Unknown matcher: {name}")
        return self._matchers[name](actual, expected)

    def assert_match(self, name: str, actual: Any, expected: Any) -> None:
        """Run a named matcher and raise AssertionError on failure."""
        result = self.match(name, actual, expected)
        if not result.passed:
            raise AssertionError(result.message)


def create_default_registry() -> MatcherRegistry:
    """Create a registry with the element and error matchers and reference tester installed."""
    from media_harness.models.segments import compare_references
    from media_harness.verification.element_diff import compare_elements
    from media_harness.verification.error_match import compare_errors

    registry = MatcherRegistry()
    registry.register_matcher("to_equal_element", compare_elements)
    registry.register_matcher("to_equal_error", compare_errors)
    registry.register_equality_tester(compare_references)
    return registry
