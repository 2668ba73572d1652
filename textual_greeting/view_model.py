"""State holder driving the reducer and exposing the display state."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from textual.widget import Widget

from .actions import Action, RequestReset
from .counter import CounterStore
from .gateway import CounterGateway
from .models import DisplayState, GreetingSettings
from .reducer import GreetingReducer
from .state import State
from .types import Reducer

logger = logging.getLogger(__name__)


class GreetingViewModel:
    """
    Holds the latest DisplayState and feeds actions through the reducer.

    Every dispatch runs as its own asyncio task on the running loop and
    writes each emitted state into the held state in order. Dispatches are
    NOT serialized against each other: when two overlap, their emissions
    interleave and the last write wins. A late "Loading..." from a second
    read can land after the first read's result.

    Observers see every replacement that changes the held state. An
    emission equal to the current state is conflated and notifies nobody,
    so two overlapping reads show a single "Loading..." to watchers.

    Example:
        ```python
        view_model = create_view_model()
        view_model.watch(lambda old, new: print(new))

        await view_model.dispatch(RequestRead())
        view_model.value.text  # "80"
        ```
    """

    __slots__ = ("_reducer", "_state", "_tasks", "_clear_task")

    def __init__(
        self,
        reducer: Reducer,
        initial: DisplayState | None = None,
        *,
        name: str | None = "greeting",
    ) -> None:
        self._reducer = reducer
        self._state: State[DisplayState] = State(
            initial if initial is not None else DisplayState(), name=name
        )
        self._tasks: set[asyncio.Task[None]] = set()
        self._clear_task: asyncio.Task[None] | None = None

    @property
    def value(self) -> DisplayState:
        """Get the current display state."""
        return self._state.value

    @property
    def state(self) -> State[DisplayState]:
        """Get the underlying state (for hooks and advanced use)."""
        return self._state

    @property
    def reducer(self) -> Reducer:
        return self._reducer

    @property
    def pending(self) -> frozenset[asyncio.Task[None]]:
        """Dispatches that have not finished yet."""
        return frozenset(self._tasks)

    @property
    def cleared(self) -> bool:
        """Whether teardown has been requested."""
        return self._clear_task is not None

    def watch(
        self, callback: Callable[[DisplayState, DisplayState], None]
    ) -> Callable[[], None]:
        """Call ``callback(old, new)`` on every replacement of the state."""
        return self._state.watch(callback)

    def subscribe(self, widget: Widget) -> None:
        """Post ``StateChanged`` messages to ``widget`` on every replacement."""
        self._state.subscribe(widget)

    def unsubscribe(self, widget: Widget) -> None:
        self._state.unsubscribe(widget)

    async def process(self, action: Action) -> None:
        """
        Run one action through the reducer and apply every emitted state.

        The reducer sees the state as it is when processing starts. Errors
        raised by the reducer propagate to the caller.
        """
        logger.debug("processing %r", action)
        async for new_state in self._reducer.reduce(self._state.value, action):
            self._state.set(new_state)

    def dispatch(self, action: Action) -> asyncio.Task[None]:
        """
        Process ``action`` in the background.

        Must be called with an asyncio loop running.

        Returns:
            The task collecting the reducer's states. Awaiting it re-raises
            any failure that escaped the reducer.
        """
        task = asyncio.get_running_loop().create_task(self.process(action))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def clear(self) -> asyncio.Task[None]:
        """
        Tear down: dispatch ``RequestReset`` exactly once.

        Later calls return the task of the first one.
        """
        if self._clear_task is None:
            logger.debug("clearing view model %s", self._state.name or "unnamed")
            self._clear_task = self.dispatch(RequestReset())
        return self._clear_task

    def __repr__(self) -> str:
        return f"GreetingViewModel({self._state.value!r})"


def create_view_model(
    settings: GreetingSettings | None = None,
    *,
    store: CounterStore | None = None,
) -> GreetingViewModel:
    """
    Wire a view model to a fresh counter.

    Args:
        settings: Tunables; defaults to ``GreetingSettings()``.
        store: An existing counter store to share instead of a new one.

    Returns:
        A GreetingViewModel reading through a CounterGateway.
    """
    settings = settings or GreetingSettings()
    if store is None:
        store = CounterStore(settings.multiplier, settings.counter_start)
    reducer = GreetingReducer(CounterGateway(store), settings)
    return GreetingViewModel(reducer, settings.initial_state())
