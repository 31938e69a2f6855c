"""
One-shot countdown that retires the project creation notification.
"""


class DismissTimer:
    """
    Counts down a grace period and fires exactly once.

    The timer is driven by the caller: every scheduling tick reports the elapsed
    time through tick(). It fires on the first tick where the cumulative elapsed
    time reaches the duration.
    """

    def __init__(self, duration: float):
        """
        Initialize the timer in the armed state.

        Args:
            duration: Grace period in seconds (must not be negative)
        """
        if duration < 0:
            raise ValueError(f"duration must not be negative, got {duration}")
        self.duration = duration
        self.elapsed = 0.0
        self.fired = False

    @property
    def remaining(self) -> float:
        return max(self.duration - self.elapsed, 0.0)

    def tick(self, elapsed: float) -> bool:
        """
        Advance the countdown.

        Args:
            elapsed: Seconds since the previous tick

        Returns:
            True on the tick the timer fires, False otherwise (including after it fired)
        """
        if self.fired:
            return False

        self.elapsed += elapsed
        if self.elapsed >= self.duration:
            self.fired = True
            return True
        return False
