"""
State model for waiter races.

A race starts pending and makes exactly one terminal transition, to either
resolved (condition observed) or timed_out (deadline elapsed). Whichever
branch fires first wins; the other branch's transition is a no-op.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# Type alias for waiter race state
WaiterState = Literal["pending", "resolved", "timed_out"]


@dataclass
class WaitRace:
    """Condition-versus-timeout race.

    Transitions:
        pending -> resolved: Condition observed before the deadline.
        pending -> timed_out: Deadline elapsed first.

    Attributes:
        description: What is being waited for (used in messages).
        state: Current race state.
    """

    description: str
    state: WaiterState = "pending"

    @property
    def is_pending(self) -> bool:
        return self.state == "pending"

    def resolve(self) -> bool:
        """Record that the condition was observed.

        Returns:
            True if this call decided the race.
        """
        return self._settle("resolved")

    def time_out(self) -> bool:
        """Record that the deadline elapsed.

        Returns:
            True if this call decided the race.
        """
        return self._settle("timed_out")

    def _settle(self, outcome: WaiterState) -> bool:
        if self.state != "pending":
            return False
        self.state = outcome
        return True
