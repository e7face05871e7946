"""
Display-side helpers: the rolling chart buffer and the tick rate limiter.
"""

from collections import deque
from typing import List, Optional
import config


class DisplayBuffer:
    """Most recent inventory values, oldest first."""

    def __init__(self, window: int = config.DISPLAY_WINDOW):
        if window < 1:
            raise ValueError(f"Display window must hold at least one value, got {window}")
        self.window = window
        self.values_window = deque(maxlen=window)

    def append(self, value: int):
        self.values_window.append(value)

    def values(self) -> List[int]:
        return list(self.values_window)

    def __len__(self) -> int:
        return len(self.values_window)


class RateLimiter:
    """Admit at most one tick per interval, whatever the frame rate.

    Late frames do not trigger a burst of catch-up ticks.
    """

    def __init__(self, interval: float = config.TICK_INTERVAL, tolerance: float = 1e-9):
        """Initialize rate limiter.

        Args:
            interval: Minimum time between admitted ticks (seconds)
            tolerance: Slack for floating point frame timestamps
        """
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        self.interval = interval
        self.tolerance = tolerance
        self.next_due: Optional[float] = None

    def ready(self, now: float) -> bool:
        """Return True if a tick should run at time `now`."""
        if self.next_due is None:
            self.next_due = now

        if now + self.tolerance < self.next_due:
            return False

        self.next_due += self.interval
        if self.next_due + self.tolerance < now:
            self.next_due = now + self.interval
        return True
