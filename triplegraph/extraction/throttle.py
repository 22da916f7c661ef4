"""
Fixed-delay throttle for model calls.
"""

import time
from typing import Callable


class Throttle:
    """
    Enforce a fixed pause between consecutive model calls.

    The pause is the same after a success, a failed extraction or a caught
    error. There is no backoff and no jitter.
    """

    def __init__(
        self,
        min_interval: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if min_interval < 0:
            raise ValueError("min_interval must be >= 0")
        self.min_interval = min_interval
        self._sleep = sleep
        self.waits = 0

    def wait(self) -> None:
        """Pause before the next call."""
        self.waits += 1
        if self.min_interval > 0:
            self._sleep(self.min_interval)
