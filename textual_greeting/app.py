"""
Greeting App - the screen rendering a GreetingViewModel.

Run with ``python -m textual_greeting.app``.
"""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Button, LoadingIndicator, Static

from .actions import RequestRead
from .effects import effect
from .hooks import ViewModelHandle, use_view_model
from .models import DisplayState, GreetingSettings
from .view_model import GreetingViewModel, create_view_model


class GreetingScreen(Screen):
    """Shows the display text, a busy indicator and the last error."""

    DEFAULT_CSS = """
    GreetingScreen {
        align: center middle;
    }

    #greeting {
        width: 60;
        height: auto;
    }

    #text {
        width: 100%;
        height: 3;
        text-align: center;
        text-style: bold;
        background: $primary;
        content-align: center middle;
    }

    #busy {
        height: 3;
    }

    #error {
        width: 100%;
        color: $error;
        text-align: center;
    }

    Button {
        width: 100%;
        margin-top: 1;
    }
    """

    greeting: ViewModelHandle

    def __init__(
        self,
        view_model: GreetingViewModel,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.view_model = view_model
        self.shown_state: DisplayState | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="greeting"):
            yield Static(self.view_model.value.text, id="text")
            yield LoadingIndicator(id="busy")
            yield Static("", id="error")
            yield Button("Retrieve Data", id="retrieve", variant="primary")

    def on_mount(self) -> None:
        self.greeting = use_view_model(
            self, self.view_model, name="greeting", subscribe=False
        )
        self._show_state(self.view_model.value)

    def on_unmount(self) -> None:
        self.greeting.release()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "retrieve":
            self.greeting.dispatch(RequestRead())

    @effect("greeting")
    def on_greeting_change(self, old: DisplayState, new: DisplayState) -> None:
        self.log(f"greeting: {old!r} -> {new!r}")
        self._show_state(new)

    def _show_state(self, state: DisplayState) -> None:
        self.query_one("#text", Static).update(state.text)
        self.query_one("#busy", LoadingIndicator).display = state.is_busy

        error = self.query_one("#error", Static)
        error.update(state.error_message or "")
        error.display = state.error_message is not None

        self.shown_state = state


class GreetingApp(App):
    """Hosts the greeting screen under the ``"greeting"`` route."""

    TITLE = "Greeting"

    GREETING_ROUTE = "greeting"

    def __init__(
        self,
        view_model: GreetingViewModel | None = None,
        *,
        settings: GreetingSettings | None = None,
    ) -> None:
        super().__init__()
        self.view_model = view_model or create_view_model(settings)

    def on_mount(self) -> None:
        self.install_screen(GreetingScreen(self.view_model), name=self.GREETING_ROUTE)
        self.push_screen(self.GREETING_ROUTE)

    async def on_unmount(self) -> None:
        # Installed screens outlive a pop, so teardown belongs to the app
        await self.view_model.clear()


if __name__ == "__main__":
    GreetingApp().run()
