"""
Configuration module for media harness.

This module provides Pydantic-based configuration models
loaded from environment variables.

Exports:
    HarnessConfig: Clock driver, waiter and fetch configuration
"""

from media_harness.config.harness_config import HarnessConfig

__all__ = [
    "HarnessConfig",
]
