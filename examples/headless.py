"""
Headless Example - drives a view model without any UI.

Shows:
- watch: observe every state the view model takes
- overlapping dispatches: the last write wins
- clear: teardown resets the counter
"""

import asyncio
import logging

from textual_greeting import (
    CounterStore,
    DisplayState,
    GreetingSettings,
    RequestRead,
    create_view_model,
)


def show(old: DisplayState, new: DisplayState) -> None:
    busy = " (busy)" if new.is_busy else ""
    error = f" error={new.error_message}" if new.error_message else ""
    print(f"{new.text}{busy}{error}")


async def main() -> None:
    store = CounterStore()
    view_model = create_view_model(GreetingSettings(simulated_delay=0.1), store=store)
    view_model.watch(show)

    # Sequential reads: 80, 160, 240
    for _ in range(3):
        await view_model.dispatch(RequestRead())

    # Overlapping reads are not serialized
    await asyncio.gather(
        view_model.dispatch(RequestRead()),
        view_model.dispatch(RequestRead()),
    )

    await view_model.clear()
    print(f"counter after clear: {store.counter}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
