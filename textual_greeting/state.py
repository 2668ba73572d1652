"""Observable state containers backed by Textual's message system."""

from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar
from weakref import WeakSet

from textual.message import Message
from textual.widget import Widget

from .types import StateCallback

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StateChanged(Message, Generic[T]):
    """Message posted to subscribed widgets when a state is replaced."""

    def __init__(self, state: State[T], old_value: T, new_value: T) -> None:
        super().__init__()
        self.state = state
        self.old_value = old_value
        self.new_value = new_value


class State(Generic[T]):
    """
    Holds the latest value and tells observers about every replacement.

    Observers come in two kinds: watcher callbacks receiving
    ``(old, new)`` synchronously, and widgets receiving a ``StateChanged``
    message. Setting a value equal to the current one notifies nobody.

    Example:
        ```python
        state = State(DisplayState(), name="greeting")
        unwatch = state.watch(lambda old, new: print(new.text))
        state.set(DisplayState(text="80"))  # prints "80"
        unwatch()
        ```
    """

    __slots__ = ("_value", "_subscribers", "_watchers", "_name")

    def __init__(self, initial_value: T, *, name: str | None = None) -> None:
        """
        Initialize a new state container.

        Args:
            initial_value: The initial value of the state.
            name: Optional name, used by @effect matching and in logs.
        """
        self._value: T = initial_value
        self._subscribers: WeakSet[Widget] = WeakSet()
        self._watchers: list[StateCallback[T]] = []
        self._name = name

    @property
    def value(self) -> T:
        """Get the current value."""
        return self._value

    @property
    def name(self) -> str | None:
        return self._name

    def set(self, value: T) -> None:
        """Replace the current value."""
        self._set_value(value)

    def _set_value(self, new_value: T) -> None:
        old_value = self._value
        if old_value == new_value:
            return

        self._value = new_value
        logger.debug("state %s: %r -> %r", self._name or "unnamed", old_value, new_value)

        # Watchers may unwatch while being notified
        for watcher in list(self._watchers):
            watcher(old_value, new_value)

        message = StateChanged(self, old_value, new_value)
        for widget in list(self._subscribers):
            widget.post_message(message)

    def subscribe(self, widget: Widget) -> None:
        """
        Subscribe a widget to changes.

        The widget receives a ``StateChanged`` message for each replacement.
        Widgets are held weakly.
        """
        self._subscribers.add(widget)

    def unsubscribe(self, widget: Widget) -> None:
        """Stop posting messages to a widget."""
        self._subscribers.discard(widget)

    def watch(self, callback: StateCallback[T]) -> Callable[[], None]:
        """
        Add a watcher callback.

        Args:
            callback: A function that receives (old_value, new_value).

        Returns:
            A function removing the watcher again.
        """
        self._watchers.append(callback)

        def unwatch() -> None:
            if callback in self._watchers:
                self._watchers.remove(callback)

        return unwatch

    def __repr__(self) -> str:
        name = f" name={self._name!r}" if self._name else ""
        return f"State({self._value!r}{name})"
