"""Value objects and settings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DisplayState(BaseModel):
    """
    What the greeting screen renders.

    Every reducer emission is a new instance; the held state is replaced
    wholesale, never mutated.
    """

    model_config = ConfigDict(frozen=True)

    text: str = "Hello"
    is_busy: bool = False
    error_message: str | None = None


class GreetingSettings(BaseModel):
    """
    Tunables for the counter, the reducer and the initial display state.

    Example:
        ```python
        settings = GreetingSettings(simulated_delay=0)
        view_model = create_view_model(settings)
        ```
    """

    model_config = ConfigDict(frozen=True)

    multiplier: int = 80
    counter_start: int = 1
    simulated_delay: float = Field(default=0.5, ge=0)
    initial_text: str = "Hello"
    loading_text: str = "Loading..."
    unknown_error: str = "Unknown error"

    def initial_state(self) -> DisplayState:
        """Display state a fresh view model starts from."""
        return DisplayState(text=self.initial_text)
