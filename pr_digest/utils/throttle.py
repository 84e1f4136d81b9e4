"""Fixed-interval request throttling."""

import time
from collections.abc import Callable


class Throttle:
    """Enforce a minimum delay between consecutive calls to ``wait``.

    The first call never blocks. Clock and sleep functions can be injected
    so the throttle is testable without real time passing.
    """

    def __init__(
        self,
        interval: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the throttle.

        Args:
        ----
            interval: Minimum number of seconds between two calls
            clock: Monotonic clock returning seconds
            sleep: Function blocking for the given number of seconds

        """
        self.interval = interval
        self._clock = clock
        self._sleep = sleep
        self._last_call: float | None = None

    def wait(self) -> float:
        """Block until the interval since the previous call has elapsed.

        Returns
        -------
            Number of seconds slept

        """
        slept = 0.0
        if self._last_call is not None:
            elapsed = self._clock() - self._last_call
            if elapsed < self.interval:
                slept = self.interval - elapsed
                self._sleep(slept)

        self._last_call = self._clock()
        return slept
