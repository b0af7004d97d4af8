"""
Segment reference models for segment index fixtures.

A segment reference describes one retrievable media chunk: its position in
the stream, its presentation interval and where its bytes live.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SegmentReference:
    """Metadata for one media segment.

    Attributes:
        position: Sequential position of the segment within its stream.
        start_time: Presentation start in seconds.
        end_time: Presentation end in seconds (exclusive).
        uris: Candidate URIs for the segment, in preference order.
        start_byte: Offset of the first byte within the resource.
        end_byte: Offset of the last byte, or None for "to the end".

    Invariants:
        - start_time < end_time for a well-formed reference
    """

    position: int
    start_time: float
    end_time: float
    uris: list[str] = field(default_factory=list)
    start_byte: int = 0
    end_byte: int | None = None

    @property
    def duration(self) -> float:
        """Duration in seconds."""
        return self.end_time - self.start_time

    @property
    def is_well_formed(self) -> bool:
        """Check that the interval is non-empty."""
        return self.start_time < self.end_time

    def contains(self, time: float) -> bool:
        """Check if ``time`` falls inside [start_time, end_time)."""
        return self.start_time <= time < self.end_time


@dataclass
class InitSegmentReference:
    """Metadata for an initialization segment (no time range)."""

    uris: list[str] = field(default_factory=list)
    start_byte: int = 0
    end_byte: int | None = None


def make_reference(
    uri: str,
    position: int,
    start: float,
    end: float,
    base_uri: str = "",
    start_byte: int = 0,
    end_byte: int | None = None,
) -> SegmentReference:
    """Create a segment reference using a relative URI.

    Args:
        uri: URI relative to base_uri.
        position: Segment position.
        start: Start time in seconds.
        end: End time in seconds.
        base_uri: Prefix joined to uri.
        start_byte: First byte offset.
        end_byte: Last byte offset or None.

    Returns:
        New SegmentReference with a single URI.
    """
    return SegmentReference(
        position=position,
        start_time=start,
        end_time=end,
        uris=[base_uri + uri],
        start_byte=start_byte,
        end_byte=end_byte,
    )


def compare_references(first: object, second: object) -> bool | None:
    """Custom equality tester for segment and init segment references.

    Returns:
        None if the pair is not two references of the same kind, otherwise
        whether every field (URIs element-wise) matches.
    """
    is_segment = isinstance(first, SegmentReference) and isinstance(
        second, SegmentReference
    )
    is_init = isinstance(first, InitSegmentReference) and isinstance(
        second, InitSegmentReference
    )
    if not (is_segment or is_init):
        return None

    a = first.uris
    b = second.uris
    if not isinstance(a, (list, tuple)) or not isinstance(b, (list, tuple)):
        return False
    if len(a) != len(b) or not all(x == y for x, y in zip(a, b)):
        return False

    if is_segment:
        return (
            first.position == second.position
            and first.start_time == second.start_time
            and first.end_time == second.end_time
            and first.start_byte == second.start_byte
            and first.end_byte == second.end_byte
        )
    return first.start_byte == second.start_byte and first.end_byte == second.end_byte


def describe_reference_differences(
    actual: SegmentReference, expected: SegmentReference
) -> list[str]:
    """List the fields that differ between two segment references.

    Returns:
        Human-readable "field: actual != expected" entries, empty if equal.
    """
    differences = []
    for name in ("position", "start_time", "end_time", "start_byte", "end_byte"):
        actual_value = getattr(actual, name)
        expected_value = getattr(expected, name)
        if actual_value != expected_value:
            differences.append(f"{name}: {actual_value!r} != {expected_value!r}")
    if list(actual.uris) != list(expected.uris):
        differences.append(f"uris: {list(actual.uris)!r} != {list(expected.uris)!r}")
    return differences
