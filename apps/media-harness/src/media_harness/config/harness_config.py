"""
Harness configuration from environment variables.

- Environment variables use HARNESS_ prefix
- Defaults reproduce the fake event loop used by the player test suites
- Validation via Pydantic Field constraints
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class HarnessConfig(BaseSettings):
    """Virtual clock and waiter configuration from environment variables.

    Attributes:
        flush_rounds: Flush passes run before each simulated step.
            Default 6 exhausts the promise-chain depth seen in practice.
        tick_seconds: Simulated time advanced per driver step.
        microtask_limit: Maximum callbacks drained by a single flush.
            Guards against code under test that reschedules itself forever.
        poll_interval_s: Interval at which waiters re-check their condition.
        fetch_timeout_s: Timeout applied to HTTP fetches.
    """

    flush_rounds: int = Field(
        default=6,
        ge=1,
        le=100,
        description="Flush passes per simulated step",
    )
    tick_seconds: float = Field(
        default=1.0,
        gt=0.0,
        le=60.0,
        description="Simulated seconds advanced per step",
    )
    microtask_limit: int = Field(
        default=10_000,
        ge=1,
        description="Maximum callbacks drained by one flush",
    )
    poll_interval_s: float = Field(
        default=0.1,
        gt=0.0,
        le=10.0,
        description="Waiter condition poll interval in seconds",
    )
    fetch_timeout_s: float = Field(
        default=30.0,
        gt=0.0,
        description="HTTP fetch timeout in seconds",
    )

    model_config = {
        "env_prefix": "HARNESS_",
        "case_sensitive": False,
    }

