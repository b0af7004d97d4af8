"""
Network boundary used by fixture loaders.
"""

from media_harness.net.fetch import FetchError, fetch

__all__ = [
    "FetchError",
    "fetch",
]
