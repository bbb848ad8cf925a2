"""Process-wide greeting counter.

Backs the v1 greeting "sequence" field. Starts at 0, lives for the process
lifetime, never persisted.
"""

import threading


class GreetingCounter:
    """Linearizable fetch-and-increment counter.

    Safe to share between the event loop and threadpool workers: every
    increment() returns a distinct value and no update is lost.

    Example:
        >>> counter = GreetingCounter()
        >>> counter.increment()
        1
        >>> counter.increment()
        2
    """

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Increment and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        """Current value (last value handed out)."""
        with self._lock:
            return self._value
