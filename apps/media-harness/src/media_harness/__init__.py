"""
Media harness: deterministic verification and simulated-time testing for
streaming media.

Subpackages:
- models: Segment references, markup trees, waiter state
- index: Segment index interface and in-memory index
- verification: Segment index verifier, markup differ, matcher registry
- clock: Virtual clock, driver and waiters
- net: HTTP fetch boundary
"""

__version__ = "0.1.0"
