"""The counter data source."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

MULTIPLIER = 10 * 4 * 2


class CounterStore:
    """
    Holds one mutable counter and derives a value from it on every read.

    Each instance owns its own counter. Reads are not synchronized: two
    concurrent callers on the same instance race on the increment.

    Example:
        ```python
        store = CounterStore()
        store.read()   # 80
        store.read()   # 160
        store.reset()  # 1
        store.read()   # 80
        ```
    """

    __slots__ = ("_counter", "_multiplier", "_start")

    def __init__(self, multiplier: int = MULTIPLIER, start: int = 1) -> None:
        self._multiplier = multiplier
        self._start = start
        self._counter = start

    @property
    def counter(self) -> int:
        """Current raw counter value."""
        return self._counter

    def read(self) -> int:
        """Return ``counter * multiplier`` and advance the counter by one."""
        value = self._counter * self._multiplier
        self._counter += 1
        logger.debug("counter read: %d (next counter %d)", value, self._counter)
        return value

    def reset(self) -> int:
        """Put the counter back to its start value and return it."""
        self._counter = self._start
        logger.debug("counter reset to %d", self._counter)
        return self._counter

    def store(self, data: int) -> None:
        """Accept a value. The counter is left untouched."""
        logger.debug("counter store ignored value %r", data)

    def __repr__(self) -> str:
        return f"CounterStore(counter={self._counter!r}, multiplier={self._multiplier!r})"
