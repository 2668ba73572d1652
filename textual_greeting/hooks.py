"""Hooks binding a view model to Textual widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from textual.widget import Widget

from .actions import Action
from .effects import connect_effects
from .models import DisplayState
from .view_model import GreetingViewModel


@dataclass(frozen=True, slots=True)
class ViewModelHandle:
    """
    A widget's binding to a view model.

    Attributes:
        view_model: The bound view model.
        widget: The widget receiving messages and effects.
    """

    view_model: GreetingViewModel
    widget: Widget
    _name: str | None = None
    _unwatchers: list[Callable[[], None]] = field(default_factory=list)

    @property
    def value(self) -> DisplayState:
        """Get the current display state."""
        return self.view_model.value

    @property
    def name(self) -> str | None:
        return self._name

    def dispatch(self, action: Action) -> None:
        """Dispatch an action to the view model."""
        self.view_model.dispatch(action)

    def release(self) -> None:
        """Disconnect the widget's effects and stop posting messages to it."""
        for unwatch in self._unwatchers:
            unwatch()
        self._unwatchers.clear()
        self.view_model.unsubscribe(self.widget)

    def __call__(self) -> DisplayState:
        """Shorthand to get the current value."""
        return self.view_model.value


def use_view_model(
    widget: Widget,
    view_model: GreetingViewModel,
    *,
    name: str | None = None,
    subscribe: bool = True,
) -> ViewModelHandle:
    """
    Bind a widget to a view model.

    Args:
        widget: The widget observing the view model.
        view_model: The view model to observe.
        name: Name for @effect matching; defaults to the state's own name.
        subscribe: Whether the widget gets ``StateChanged`` messages.

    Returns:
        A ViewModelHandle with value, dispatch and release.

    Example:
        ```python
        class GreetingScreen(Screen):
            def on_mount(self):
                self.greeting = use_view_model(self, self.view_model)

            @effect("greeting")
            def on_greeting_change(self, old: DisplayState, new: DisplayState):
                self.refresh_display(new)
        ```
    """
    if subscribe:
        view_model.subscribe(widget)

    name = name or view_model.state.name
    unwatchers = connect_effects(widget, name, view_model.state) if name else []

    return ViewModelHandle(view_model, widget, name, unwatchers)
