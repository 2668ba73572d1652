"""Gateway between the reducer and the counter store."""

from __future__ import annotations

from .counter import CounterStore


class CounterGateway:
    """
    Async seam over a CounterStore.

    Only delegates. Tests swap it for any object satisfying
    ``textual_greeting.types.DataGateway``.
    """

    __slots__ = ("_store",)

    def __init__(self, store: CounterStore) -> None:
        self._store = store

    @property
    def source(self) -> CounterStore:
        """Get the wrapped store."""
        return self._store

    async def fetch(self) -> int:
        return self._store.read()

    async def clear(self) -> int:
        return self._store.reset()

    async def store(self, data: int) -> None:
        self._store.store(data)
