"""
Verification components.

Components:
- verify_segment_index / verify_stream: Segment index boundary checks
- diff_elements / compare_elements: First-divergence markup tree differ
- MatcherRegistry: Pluggable matchers and equality testers
- error_matching / compare_errors: Error comparison on critical fields
"""

from media_harness.verification.element_diff import (
    Divergence,
    ElementMismatchError,
    assert_elements_equal,
    compare_elements,
    diff_elements,
    elements_equal,
    first_divergence,
)
from media_harness.verification.error_match import (
    ERROR_FIELDS,
    ErrorMatching,
    compare_errors,
    error_matching,
)
from media_harness.verification.matchers import (
    MatcherRegistry,
    MatchResult,
    create_default_registry,
)
from media_harness.verification.segment_index import (
    SegmentIndexMismatchError,
    verify_segment_index,
    verify_stream,
)

__all__ = [
    "Divergence",
    "ElementMismatchError",
    "assert_elements_equal",
    "compare_elements",
    "diff_elements",
    "elements_equal",
    "first_divergence",
    "ERROR_FIELDS",
    "ErrorMatching",
    "compare_errors",
    "error_matching",
    "MatcherRegistry",
    "MatchResult",
    "create_default_registry",
    "SegmentIndexMismatchError",
    "verify_segment_index",
    "verify_stream",
]
