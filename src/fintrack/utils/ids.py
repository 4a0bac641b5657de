"""Record id generation."""

import time
from typing import Callable, Optional


class RecordIdGenerator:
    """Generate record ids from a millisecond timestamp.

    Ids are the decimal string of the current time in milliseconds. Two ids
    requested within the same millisecond (or after the clock steps back)
    still come out strictly increasing.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.time
        self._last = 0

    def __call__(self) -> str:
        now = int(self._clock() * 1000)
        if now <= self._last:
            now = self._last + 1
        self._last = now
        return str(now)
