"""
Data models for media harness.

This module provides data models for:
- Segments: SegmentReference, InitSegmentReference
- Trees: TextNode, ElementNode
- State: WaitRace, WaiterState
"""

from __future__ import annotations

from media_harness.models.segments import (
    InitSegmentReference,
    SegmentReference,
    compare_references,
    make_reference,
)
from media_harness.models.state import WaiterState, WaitRace
from media_harness.models.tree import ElementNode, TextNode, TreeNode, parse_markup

__all__ = [
    "InitSegmentReference",
    "SegmentReference",
    "compare_references",
    "make_reference",
    "ElementNode",
    "TextNode",
    "TreeNode",
    "parse_markup",
    "WaitRace",
    "WaiterState",
]
