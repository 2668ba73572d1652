"""Tests for GreetingApp and GreetingScreen."""

import asyncio
from unittest.mock import AsyncMock

from textual.widgets import LoadingIndicator, Static

from textual_greeting import (
    CounterStore,
    DisplayState,
    GreetingReducer,
    GreetingSettings,
    GreetingViewModel,
    OperationFailedError,
    create_view_model,
)
from textual_greeting.app import GreetingApp, GreetingScreen

NO_DELAY = GreetingSettings(simulated_delay=0)


async def settle(pilot, view_model):
    await pilot.pause()
    if view_model.pending:
        await asyncio.gather(*view_model.pending)
    await pilot.pause()


class TestGreetingScreen:
    """Tests for the greeting screen."""

    def test_renders_initial_state(self):
        app = GreetingApp(settings=NO_DELAY)

        async def run():
            async with app.run_test() as pilot:
                await pilot.pause()
                screen = app.screen
                assert isinstance(screen, GreetingScreen)
                assert screen.shown_state == DisplayState()
                assert screen.query_one("#busy", LoadingIndicator).display is False
                assert screen.query_one("#error", Static).display is False

        asyncio.run(run())

    def test_retrieve_data_shows_value(self):
        app = GreetingApp(settings=NO_DELAY)

        async def run():
            async with app.run_test() as pilot:
                await pilot.pause()
                await pilot.click("#retrieve")
                await settle(pilot, app.view_model)

                assert app.view_model.value.text == "80"
                assert app.screen.shown_state == DisplayState(text="80")
                assert app.screen.query_one("#busy", LoadingIndicator).display is False

                # The button ignores clicks until its active effect ends
                await pilot.pause(0.3)
                await pilot.click("#retrieve")
                await settle(pilot, app.view_model)
                assert app.screen.shown_state.text == "160"

        asyncio.run(run())

    def test_retrieve_data_shows_error(self):
        gateway = AsyncMock()
        gateway.fetch.side_effect = OperationFailedError("Network error")
        view_model = GreetingViewModel(GreetingReducer(gateway, NO_DELAY))
        app = GreetingApp(view_model)

        async def run():
            async with app.run_test() as pilot:
                await pilot.pause()
                await pilot.click("#retrieve")
                await settle(pilot, view_model)

                screen = app.screen
                assert screen.shown_state == DisplayState(
                    text="Hello", error_message="Network error"
                )
                assert screen.query_one("#error", Static).display is True

        asyncio.run(run())

    def test_screen_renders_through_effects_only(self):
        app = GreetingApp(settings=NO_DELAY)

        async def run():
            async with app.run_test() as pilot:
                await pilot.pause()
                assert app.screen not in app.view_model.state._subscribers

        asyncio.run(run())

    def test_installs_greeting_route(self):
        app = GreetingApp(settings=NO_DELAY)

        async def run():
            async with app.run_test() as pilot:
                await pilot.pause()
                assert app.is_screen_installed("greeting") is True
                assert app.screen is app.get_screen("greeting")

        asyncio.run(run())

    def test_popping_screen_keeps_counter(self):
        store = CounterStore()
        view_model = create_view_model(NO_DELAY, store=store)
        app = GreetingApp(view_model)

        async def run():
            async with app.run_test() as pilot:
                await pilot.pause()
                await pilot.click("#retrieve")
                await settle(pilot, view_model)

                await app.pop_screen()
                await pilot.pause()

                assert app.is_screen_installed("greeting") is True
                assert view_model.cleared is False
                assert store.counter == 2

        asyncio.run(run())

    def test_app_exit_resets_counter_once(self):
        store = CounterStore()
        view_model = create_view_model(NO_DELAY, store=store)
        app = GreetingApp(view_model)

        async def run():
            async with app.run_test() as pilot:
                await pilot.pause()
                await pilot.click("#retrieve")
                await settle(pilot, view_model)
                assert store.counter == 2

            assert view_model.cleared is True
            first = view_model.clear()
            await first
            assert view_model.clear() is first

        asyncio.run(run())

        assert store.counter == 1
