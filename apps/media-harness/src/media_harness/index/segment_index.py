"""
Segment index interface and an in-memory implementation.

A segment index maps playback time to a segment position and a position to
its SegmentReference. Manifest parsers produce indexes; the verifier only
consumes the two query operations.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

from media_harness.models.segments import SegmentReference

logger = logging.getLogger(__name__)


@runtime_checkable
class SegmentIndex(Protocol):
    """Queryable segment index."""

    def find(self, time: float) -> int | None:
        """Return the position of the segment covering ``time``.

        Times before the first segment resolve to the first segment. Times
        that no segment covers or follows resolve to None.
        """

    def get(self, position: int) -> SegmentReference | None:
        """Return the reference at ``position`` or None outside the index."""


class ReferenceListIndex:
    """Segment index backed by a list of references sorted by position.

    Attributes:
        _references: References sorted by position
        _start_times: Start times parallel to _references, for bisection
    """

    def __init__(self, references: Iterable[SegmentReference] = ()) -> None:
        self._references = sorted(references, key=lambda ref: ref.position)
        self._start_times = [ref.start_time for ref in self._references]
        self._by_position = {ref.position: ref for ref in self._references}

        if len(self._by_position) != len(self._references):
            raise ValueError("Segment positions must be unique")

        logger.debug(f"ReferenceListIndex built with {len(self._references)} references")

    def find(self, time: float) -> int | None:
        if not self._references:
            return None

        # Last segment starting at or before `time`
        i = bisect.bisect_right(self._start_times, time) - 1
        if i < 0:
            return self._references[0].position

        ref = self._references[i]
        if time < ref.end_time:
            return ref.position

        # In a gap: the next segment follows `time`
        if i + 1 < len(self._references):
            return self._references[i + 1].position
        return None

    def get(self, position: int) -> SegmentReference | None:
        return self._by_position.get(position)

    @property
    def first_position(self) -> int | None:
        return self._references[0].position if self._references else None

    @property
    def last_position(self) -> int | None:
        return self._references[-1].position if self._references else None

    def __len__(self) -> int:
        return len(self._references)

    def __iter__(self) -> Iterator[SegmentReference]:
        return iter(self._references)
