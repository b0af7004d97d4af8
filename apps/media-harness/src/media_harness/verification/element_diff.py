"""
Structural differ for markup trees.

Compares two trees in pre-order and reports the first divergence only.
Attributes are compared by position rather than looked up by name, so two
elements with the same attribute set in a different order do not match.

Nodes may be TextNode/ElementNode instances or any object exposing
``tag_name`` (None for non-elements), ``attributes``, ``child_nodes`` and
``text_content``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from media_harness.verification.matchers import MatchResult

logger = logging.getLogger(__name__)


class ElementMismatchError(AssertionError):
    """Raised when two markup trees differ."""

    pass


@dataclass(frozen=True)
class Divergence:
    """First point where two trees differ.

    Attributes:
        path: Slash-separated path from the root to the divergent node.
        reason: Short description of the difference.
        actual: Markup (or text) of the actual node at the divergence.
        expected: Markup (or text) of the expected node at the divergence.
    """

    path: str
    reason: str
    actual: str
    expected: str

    @property
    def message(self) -> str:
        return (
            f"The difference was in {self.actual} vs {self.expected} "
            f"at {self.path}: {self.reason}"
        )


def _is_element(node: Any) -> bool:
    return getattr(node, "tag_name", None) is not None


def _describe(node: Any) -> str:
    return getattr(node, "outer_markup", None) or node.text_content


def _attribute_pairs(node: Any) -> list[tuple[str, str]]:
    attributes = node.attributes
    if isinstance(attributes, Mapping):
        return list(attributes.items())
    return list(attributes)


def _child_segment(node: Any, index: int) -> str:
    if _is_element(node):
        return f"{node.tag_name}[{index}]"
    return f"#text[{index}]"


def _diff(actual: Any, expected: Any, path: str) -> Divergence | None:
    def divergence(reason: str) -> Divergence:
        return Divergence(
            path=path,
            reason=reason,
            actual=_describe(actual),
            expected=_describe(expected),
        )

    actual_is_element = _is_element(actual)
    expected_is_element = _is_element(expected)

    if not actual_is_element and not expected_is_element:
        if actual.text_content != expected.text_content:
            return divergence("Nodes are different.")
        return None

    if not actual_is_element or not expected_is_element:
        return divergence("One is element, one isn't.")

    if actual.tag_name != expected.tag_name:
        return divergence("Different tagName.")

    actual_attributes = _attribute_pairs(actual)
    expected_attributes = _attribute_pairs(expected)
    if len(actual_attributes) != len(expected_attributes):
        return divergence("Different attribute list length.")

    for i, ((a_name, a_value), (e_name, e_value)) in enumerate(
        zip(actual_attributes, expected_attributes)
    ):
        if a_name != e_name or a_value != e_value:
            note = f"{a_name}={a_value} vs {e_name}={e_value}"
            return divergence(f"Attribute #{i} was different ({note}).")

    actual_children = list(actual.child_nodes)
    expected_children = list(expected.child_nodes)
    if len(actual_children) != len(expected_children):
        return divergence("Different child node list length.")

    for i, (a_child, e_child) in enumerate(zip(actual_children, expected_children)):
        result = _diff(a_child, e_child, f"{path}/{_child_segment(e_child, i)}")
        if result is not None:
            return result

    return None


def first_divergence(actual: Any, expected: Any) -> Divergence | None:
    """Find the first divergence between two trees.

    Args:
        actual: Root of the tree under test.
        expected: Root of the reference tree.

    Returns:
        Divergence describing the first difference, or None if equal.
    """
    root = f"/{expected.tag_name}" if _is_element(expected) else "/#text"
    result = _diff(actual, expected, root)
    if result is not None:
        logger.debug(f"TREE DIVERGENCE at {result.path}: {result.reason}")
    return result


def diff_elements(actual: Any, expected: Any) -> str | None:
    """Describe the first divergence between two trees, or None if equal."""
    result = first_divergence(actual, expected)
    return result.message if result is not None else None


def elements_equal(actual: Any, expected: Any) -> bool:
    return diff_elements(actual, expected) is None


def _inner(node: Any) -> str:
    inner = getattr(node, "inner_markup", None)
    return inner if inner is not None else node.text_content


def compare_elements(actual: Any, expected: Any) -> MatchResult:
    """Matcher form of the differ.

    Returns:
        MatchResult whose message explains the match (for negated
        assertions) or includes the divergence (for failures).
    """
    diff = diff_elements(actual, expected)
    if diff is None:
        return MatchResult(
            passed=True,
            message=f"Expected {_inner(actual)} not to match {_inner(expected)}.",
        )
    return MatchResult(
        passed=False,
        message=f"Expected {_inner(actual)} to match {_inner(expected)}. {diff}",
    )


def assert_elements_equal(actual: Any, expected: Any) -> None:
    """Raise ElementMismatchError if the two trees differ."""
    result = compare_elements(actual, expected)
    if not result.passed:
        raise ElementMismatchError(result.message)
