"""Async reducer turning actions into display states."""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator

from .actions import Action, RequestRead, RequestReset, unknown_action
from .errors import failure_message
from .models import DisplayState, GreetingSettings
from .types import DataGateway

logger = logging.getLogger(__name__)


class GreetingReducer:
    """
    Maps ``(current state, action)`` to a finite async stream of states.

    ``RequestRead`` always yields exactly two states: a loading state and then
    either the fetched value or the error. Read failures never escape.

    ``RequestReset`` yields nothing. A failing ``clear()`` is NOT caught and
    propagates out of the iteration.

    Example:
        ```python
        reducer = GreetingReducer(CounterGateway(CounterStore()))

        async for state in reducer.reduce(DisplayState(), RequestRead()):
            print(state.text)  # "Loading...", then "80"
        ```
    """

    __slots__ = ("_gateway", "_settings")

    def __init__(
        self,
        gateway: DataGateway,
        settings: GreetingSettings | None = None,
    ) -> None:
        self._gateway = gateway
        self._settings = settings or GreetingSettings()

    @property
    def gateway(self) -> DataGateway:
        """Get the gateway this reducer reads through."""
        return self._gateway

    async def reduce(
        self, current: DisplayState, action: Action
    ) -> AsyncIterator[DisplayState]:
        """
        Process an action.

        Args:
            current: The state at the time the action was dispatched.
            action: The action to process.

        Yields:
            The states that follow, in order.
        """
        match action:
            case RequestRead():
                yield current.model_copy(
                    update={
                        "text": self._settings.loading_text,
                        "is_busy": True,
                        "error_message": None,
                    }
                )
                try:
                    if self._settings.simulated_delay:
                        await asyncio.sleep(self._settings.simulated_delay)
                    value = await self._gateway.fetch()
                except Exception as exc:
                    logger.warning("read failed: %r", exc)
                    # Text falls back to the original input, not the loading text
                    yield current.model_copy(
                        update={
                            "is_busy": False,
                            "error_message": failure_message(
                                exc, self._settings.unknown_error
                            ),
                        }
                    )
                else:
                    logger.debug("read succeeded: %d", value)
                    yield current.model_copy(
                        update={
                            "text": str(value),
                            "is_busy": False,
                            "error_message": None,
                        }
                    )

            case RequestReset():
                start = await self._gateway.clear()
                logger.debug("reset gateway, counter back to %d", start)

            case _:
                unknown_action(action)
