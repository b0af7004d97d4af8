"""
Focused logging configuration for debugging clock-driven test scenarios.

Usage:
  Set LOG_FOCUS=1 environment variable to enable focused logging.
  Only logs from the clock driver, waiters and verifiers will be shown at
  LOG_LEVEL. Other modules will be set to WARNING level to reduce noise.

Modules included in focused logging:
  - media_harness.clock.driver (simulated steps)
  - media_harness.clock.waiter (condition/timeout races)
  - media_harness.verification.segment_index (index checks)
  - media_harness.verification.element_diff (tree divergence)
  - media_harness.verification.error_match (error field mismatches)

Example:
  LOG_LEVEL=DEBUG LOG_FOCUS=1 pytest apps/media-harness/tests

  The test suite calls configure_focused_logging() from its pytest_configure
  hook, so these variables apply to every test run.
"""

import logging
import os

FOCUSED_MODULES = [
    "media_harness.clock.driver",
    "media_harness.clock.waiter",
    "media_harness.verification.segment_index",
    "media_harness.verification.element_diff",
    "media_harness.verification.error_match",
]

LOG_FORMAT = "%(asctime)s.%(msecs)03d | %(name)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_focused_logging() -> None:
    """Configure logging to focus on clock, waiter and verifier modules.

    When LOG_FOCUS=1 is set:
    - Focused modules log at LOG_LEVEL (default INFO)
    - Other modules log at WARNING only
    """
    log_level = os.getenv("LOG_LEVEL", "INFO")
    log_focus = os.getenv("LOG_FOCUS", "0") == "1"

    logging.basicConfig(
        level=log_level if not log_focus else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        force=True,
    )

    if not log_focus:
        return

    for module in FOCUSED_MODULES:
        logging.getLogger(module).setLevel(log_level)

    logging.getLogger().warning(
        f"Focused logging enabled: {', '.join(FOCUSED_MODULES)} at {log_level}"
    )


# Predefined log filter patterns for grep
LOG_PATTERNS = {
    "clock": [
        "SIM STEP",
        "SIM RUN",
        "Timer fired",
        "Clock reset",
    ],
    "waiter": [
        "WAIT START",
        "WAIT RESOLVED",
        "WAIT TIMEOUT",
    ],
    "verify": [
        "INDEX CHECK",
        "INDEX MISMATCH",
        "TREE DIVERGENCE",
        "ERROR MISMATCH",
    ],
}


def get_grep_pattern(focus: str) -> str:
    """Get grep pattern for filtering logs.

    Args:
        focus: One of 'clock', 'waiter', 'verify', or 'all'

    Returns:
        Grep-compatible regex pattern
    """
    if focus == "all":
        all_patterns = []
        for patterns in LOG_PATTERNS.values():
            all_patterns.extend(patterns)
        return "|".join(all_patterns)

    patterns = LOG_PATTERNS.get(focus, [])
    return "|".join(patterns)
