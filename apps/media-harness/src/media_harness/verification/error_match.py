"""
Error comparison on critical fields.

Errors raised by a player carry severity, category, code and data. Other
attributes (tracebacks, debug-only context, runtime-added properties) vary
between runs, so errors are compared on the named fields only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from media_harness.verification.matchers import MatchResult

logger = logging.getLogger(__name__)

ERROR_FIELDS = ("severity", "category", "code", "data")


class ErrorMatching:
    """Compares equal to any object whose named fields equal the expected ones.

    Missing attributes read as None on both sides.

    Attributes:
        fields: Attribute names taking part in the comparison
        expected: Expected value per field
    """

    __hash__ = None

    def __init__(self, expected: Any, fields: Iterable[str] = ERROR_FIELDS) -> None:
        self.fields = tuple(fields)
        self.expected = {name: getattr(expected, name, None) for name in self.fields}

    def differences(self, actual: Any) -> list[str]:
        """Describe each field where ``actual`` differs, as ``name (actual vs expected)``."""
        return [
            f"{name} ({getattr(actual, name, None)!r} vs {value!r})"
            for name, value in self.expected.items()
            if getattr(actual, name, None) != value
        ]

    def __eq__(self, other: object) -> bool:
        return not self.differences(other)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self.expected.items())
        return f"<error matching {fields}>"


def error_matching(expected: Any, fields: Iterable[str] = ERROR_FIELDS) -> ErrorMatching:
    """Build a value that equals any error sharing ``expected``'s critical fields."""
    return ErrorMatching(expected, fields)


def compare_errors(actual: Any, expected: Any) -> MatchResult:
    """Matcher: ``actual`` equals ``expected`` on severity, category, code and data."""
    matching = error_matching(expected)
    differences = matching.differences(actual)
    if not differences:
        return MatchResult(True, f"Expected {actual!r} not to match {matching!r}.")

    logger.debug(f"ERROR MISMATCH: {', '.join(differences)}")
    return MatchResult(
        False,
        f"Expected {actual!r} to match {matching!r}. Different: {', '.join(differences)}",
    )
