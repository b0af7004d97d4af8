"""
Segment index interface and fixtures.

Components:
- SegmentIndex: Protocol consumed by the verifier
- ReferenceListIndex: In-memory index built from a list of references
"""

from media_harness.index.segment_index import ReferenceListIndex, SegmentIndex

__all__ = [
    "ReferenceListIndex",
    "SegmentIndex",
]
