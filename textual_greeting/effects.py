"""Effect decorator for reacting to named state changes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

if TYPE_CHECKING:
    from .state import State

F = TypeVar("F", bound=Callable[..., Any])

# Attribute name to store effect metadata on methods
EFFECT_ATTR = "__textual_greeting_effects__"


class EffectRegistration:
    """State names a method wants to be called for."""

    __slots__ = ("targets",)

    def __init__(self) -> None:
        self.targets: list[str] = []

    def add(self, target: str) -> None:
        if target not in self.targets:
            self.targets.append(target)


def get_effect_registration(method: Callable[..., Any]) -> EffectRegistration | None:
    """Get effect registration from a method, if any."""
    return getattr(method, EFFECT_ATTR, None)


def effect(*targets: str) -> Callable[[F], F]:
    """
    Mark a widget method as an effect of one or more named states.

    The method is called with ``(old, new)`` each time a matching state is
    replaced, once the state has been bound to the widget with
    ``use_view_model(widget, view_model, name=...)``.

    Example:
        ```python
        class GreetingScreen(Screen):
            def on_mount(self):
                use_view_model(self, self.view_model, name="greeting")

            @effect("greeting")
            def on_greeting_change(self, old: DisplayState, new: DisplayState):
                self.query_one("#text", Static).update(new.text)
        ```
    """
    if not targets:
        raise ValueError("@effect requires at least one target")

    def decorator(method: F) -> F:
        registration = get_effect_registration(method)
        if registration is None:
            registration = EffectRegistration()
            setattr(method, EFFECT_ATTR, registration)

        for target in targets:
            registration.add(target)

        return method

    return decorator


def connect_effects(widget: Any, state_name: str, state: State[Any]) -> list[Callable[[], None]]:
    """
    Watch ``state`` with every @effect method of ``widget`` targeting ``state_name``.

    Returns:
        The unwatch functions of the connected effects.
    """
    unwatchers: list[Callable[[], None]] = []

    for attr_name in dir(type(widget)):
        if attr_name.startswith("_"):
            continue

        # Look the attribute up on the class so properties are not evaluated
        try:
            class_attr = getattr(type(widget), attr_name, None)
        except (AttributeError, AssertionError, TypeError):
            continue
        if class_attr is None:
            continue

        registration = get_effect_registration(class_attr)
        if registration is None or state_name not in registration.targets:
            continue

        method = getattr(widget, attr_name)
        if callable(method):
            unwatchers.append(state.watch(lambda old, new, m=method: m(old, new)))

    return unwatchers
