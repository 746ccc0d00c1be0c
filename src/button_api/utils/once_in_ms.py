"""
Timing utility for throttling work inside a polling loop
"""

import time
from typing import Callable


class OnceInMs:
    """
    Timer for throttling code execution to at most once per interval.

    The control loop polls every few milliseconds; use this to limit how
    often slower work (status summaries, reconnect checks) runs.

    Example:
        status_timer = OnceInMs(10000)  # Once every 10 seconds

        while True:
            monitor.poll_once()
            if status_timer.should_execute():
                monitor.log_status()
    """

    def __init__(self, interval_ms: int, clock: Callable[[], float] = time.monotonic):
        """
        Initialize timer with interval.

        Args:
            interval_ms: Minimum milliseconds between executions
            clock: Time source in seconds
        """
        if interval_ms < 0:
            raise ValueError(f"interval_ms must be non-negative, got {interval_ms}")
        self.interval_ms = interval_ms
        self.interval = interval_ms / 1000.0
        self._clock = clock
        self.last_execution = clock()

    def should_execute(self) -> bool:
        """
        Check if enough time has passed and restart the timer if so.

        Returns:
            True if interval has passed (and timer is restarted), False otherwise
        """
        current = self._clock()
        if current - self.last_execution >= self.interval:
            self.last_execution = current
            return True
        return False

    def reset(self) -> None:
        """Restart the interval from now"""
        self.last_execution = self._clock()

    def elapsed_ms(self) -> float:
        """Get milliseconds elapsed since last execution"""
        return (self._clock() - self.last_execution) * 1000

    def remaining_ms(self) -> float:
        """Get milliseconds remaining until next execution (negative if overdue)"""
        return self.interval_ms - self.elapsed_ms()
