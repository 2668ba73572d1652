"""Type definitions for textual-greeting."""

from typing import AsyncIterator, Protocol, TypeVar

from .actions import Action
from .models import DisplayState

# Type variables
T = TypeVar("T")


class DataGateway(Protocol):
    """Protocol for the data seam the reducer talks to."""

    async def fetch(self) -> int:
        """Retrieve the next value."""
        ...

    async def clear(self) -> int:
        """Reset the underlying source and return its start value."""
        ...

    async def store(self, data: int) -> None:
        """Hand a value to the underlying source."""
        ...


class Reducer(Protocol):
    """Protocol for async reducers."""

    def reduce(
        self, current: DisplayState, action: Action
    ) -> AsyncIterator[DisplayState]:
        """Process an action and produce the following states."""
        ...


class StateCallback(Protocol[T]):
    """Protocol for state change callbacks."""

    def __call__(self, old_value: T, new_value: T) -> None:
        """Called when state changes."""
        ...
