"""
Unit tests for SegmentReference helpers and the reference equality tester.
"""

from __future__ import annotations

from media_harness.models.segments import (
    InitSegmentReference,
    SegmentReference,
    compare_references,
    describe_reference_differences,
    make_reference,
)


class TestMakeReference:
    """Tests for make_reference()."""

    def test_joins_base_uri(self) -> None:
        """Test that the single URI is base_uri + uri."""
        ref = make_reference("seg.mp4", 3, 6.0, 9.0, base_uri="http://example.com/")

        assert ref.uris == ["http://example.com/seg.mp4"]
        assert ref.position == 3
        assert ref.start_time == 6.0
        assert ref.end_time == 9.0

    def test_default_byte_range(self) -> None:
        """Test default byte range covers the whole resource."""
        ref = make_reference("seg.mp4", 0, 0, 1)

        assert ref.start_byte == 0
        assert ref.end_byte is None

    def test_duration_and_well_formed(self) -> None:
        """Test derived properties."""
        ref = make_reference("seg.mp4", 0, 2.5, 4.0)

        assert ref.duration == 1.5
        assert ref.is_well_formed is True
        assert make_reference("x", 0, 4.0, 4.0).is_well_formed is False

    def test_contains_is_half_open(self) -> None:
        """Test that contains() includes the start and excludes the end."""
        ref = make_reference("seg.mp4", 0, 5, 10)

        assert ref.contains(5) is True
        assert ref.contains(9.999) is True
        assert ref.contains(10) is False


class TestCompareReferences:
    """Tests for compare_references()."""

    def test_equal_segment_references(self) -> None:
        """Test identical references compare equal."""
        a = make_reference("seg.mp4", 0, 0, 5)
        b = make_reference("seg.mp4", 0, 0, 5)

        assert compare_references(a, b) is True

    def test_each_field_is_compared(self) -> None:
        """Test that a change in any single field fails the comparison."""
        base = make_reference("seg.mp4", 0, 0, 5, start_byte=10, end_byte=20)
        variants = [
            make_reference("seg.mp4", 1, 0, 5, start_byte=10, end_byte=20),
            make_reference("seg.mp4", 0, 1, 5, start_byte=10, end_byte=20),
            make_reference("seg.mp4", 0, 0, 6, start_byte=10, end_byte=20),
            make_reference("seg.mp4", 0, 0, 5, start_byte=11, end_byte=20),
            make_reference("seg.mp4", 0, 0, 5, start_byte=10, end_byte=21),
            make_reference("other.mp4", 0, 0, 5, start_byte=10, end_byte=20),
        ]

        for variant in variants:
            assert compare_references(variant, base) is False

    def test_uri_list_length_matters(self) -> None:
        """Test that an extra URI fails the comparison."""
        a = SegmentReference(0, 0, 5, uris=["a", "b"])
        b = SegmentReference(0, 0, 5, uris=["a"])

        assert compare_references(a, b) is False

    def test_init_segment_references(self) -> None:
        """Test init references compare URIs and byte range."""
        a = InitSegmentReference(uris=["init.mp4"], start_byte=0, end_byte=100)
        b = InitSegmentReference(uris=["init.mp4"], start_byte=0, end_byte=100)
        c = InitSegmentReference(uris=["init.mp4"], start_byte=0, end_byte=101)

        assert compare_references(a, b) is True
        assert compare_references(a, c) is False

    def test_not_applicable_returns_none(self) -> None:
        """Test that mixed or foreign types are left to other testers."""
        ref = make_reference("seg.mp4", 0, 0, 5)
        init = InitSegmentReference(uris=["seg.mp4"])

        assert compare_references(ref, init) is None
        assert compare_references(ref, None) is None
        assert compare_references(1, 1) is None


class TestDescribeReferenceDifferences:
    """Tests for describe_reference_differences()."""

    def test_no_differences(self) -> None:
        ref = make_reference("seg.mp4", 0, 0, 5)

        assert describe_reference_differences(ref, make_reference("seg.mp4", 0, 0, 5)) == []

    def test_lists_changed_fields(self) -> None:
        actual = make_reference("seg.mp4", 0, 0, 5, end_byte=99)
        expected = make_reference("seg.mp4", 0, 0, 5, end_byte=100)

        assert describe_reference_differences(actual, expected) == ["end_byte: 99 != 100"]
