"""
Segment index verifier.

Checks that an index round-trips an expected, ordered list of segment
references and gets the timeline boundaries right:

- Querying time 0 clamps forward to the first segment, even when the first
  segment does not start at 0
- Each reference is found at its start time and retrieved exactly
- Nothing is found at the end of the last segment, and there is no
  reference past the last position
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from media_harness.index.segment_index import SegmentIndex
from media_harness.models.segments import SegmentReference, describe_reference_differences
from media_harness.verification.matchers import MatcherRegistry, create_default_registry

logger = logging.getLogger(__name__)


class SegmentIndexMismatchError(AssertionError):
    """Raised when a segment index disagrees with the expected references.

    Attributes:
        check: Name of the failed check.
        expected: Expected value.
        actual: Value returned by the index.
    """

    def __init__(self, check: str, expected: Any, actual: Any, detail: str = "") -> None:
        self.check = check
        self.expected = expected
        self.actual = actual
        message = f"{check}: expected {expected!r}, got {actual!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


def _fail(check: str, expected: Any, actual: Any, detail: str = "") -> None:
    logger.debug(f"INDEX MISMATCH {check}: expected={expected!r} actual={actual!r}")
    raise SegmentIndexMismatchError(check, expected, actual, detail)


def verify_segment_index(
    index: SegmentIndex,
    references: Sequence[SegmentReference],
    registry: MatcherRegistry | None = None,
) -> None:
    """Verify an index against the expected references.

    Args:
        index: Index under test.
        references: Expected references, ordered by position.
        registry: Equality testers used to compare references
            (default registry compares every reference field).

    Raises:
        SegmentIndexMismatchError: On the first check that fails
    """
    registry = registry or create_default_registry()

    if not references:
        position = index.find(0)
        if position is not None:
            _fail("find(0) on empty index", None, position)
        logger.debug("INDEX CHECK empty index OK")
        return

    first = references[0]
    position = index.find(0)
    if position != first.position:
        _fail("find(0) must clamp to the first segment", first.position, position)

    for expected_ref in references:
        # Never query negative times
        start_time = max(0, expected_ref.start_time)
        position = index.find(start_time)
        if position is None:
            _fail(f"find({start_time})", expected_ref.position, None)

        actual_ref = index.get(position)
        if not registry.equals(actual_ref, expected_ref):
            detail = ""
            if isinstance(actual_ref, SegmentReference):
                detail = ", ".join(describe_reference_differences(actual_ref, expected_ref))
            _fail(f"get({position})", expected_ref, actual_ref, detail)

        logger.debug(f"INDEX CHECK position={position} start={start_time} OK")

    last = references[-1]
    position_after_end = index.find(last.end_time)
    if position_after_end is not None:
        _fail(f"find({last.end_time}) past the last segment", None, position_after_end)

    reference_past_end = index.get(last.position + 1)
    if reference_past_end is not None:
        _fail(f"get({last.position + 1}) past the last segment", None, reference_past_end)

    logger.debug(f"INDEX CHECK {len(references)} references verified")


def verify_stream(
    stream: Any,
    references: Sequence[SegmentReference],
    registry: MatcherRegistry | None = None,
) -> None:
    """Verify the segment index attached to a stream.

    Args:
        stream: Object with a ``segment_index`` attribute.
        references: Expected references, ordered by position.
        registry: Equality testers used to compare references.

    Raises:
        SegmentIndexMismatchError: If the stream or its index is missing,
            or the index fails verification
    """
    if stream is None:
        _fail("stream", "a stream", None)

    segment_index = getattr(stream, "segment_index", None)
    if segment_index is None:
        _fail("stream.segment_index", "a segment index", None)

    verify_segment_index(segment_index, references, registry)
