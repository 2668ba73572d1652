"""
Textual Greeting - an MVVM greeting screen for Textual.

A view model holds the current display state and runs every action through
an async reducer, which reads a counter through a gateway.

Key Features:
- CounterStore / CounterGateway: the data source and its async seam
- GreetingReducer: (state, action) -> async stream of states
- GreetingViewModel: holds the state, dispatches actions, tears down
- use_view_model / @effect: bind a view model to Textual widgets
- GreetingApp: the screen itself

Example:
    ```python
    import asyncio

    from textual_greeting import GreetingSettings, RequestRead, create_view_model

    async def main() -> None:
        view_model = create_view_model(GreetingSettings(simulated_delay=0))
        view_model.watch(lambda old, new: print(new.text))

        await view_model.dispatch(RequestRead())  # prints "Loading...", then "80"
        await view_model.clear()

    asyncio.run(main())
    ```
"""

# Actions and values
from .actions import (
    Action,
    RequestRead,
    RequestReset,
)
from .models import (
    DisplayState,
    GreetingSettings,
)
from .errors import (
    OperationFailedError,
    failure_message,
)

# Data
from .counter import CounterStore
from .gateway import CounterGateway

# Reducer and view model
from .reducer import GreetingReducer
from .view_model import (
    GreetingViewModel,
    create_view_model,
)

# State primitives
from .state import (
    State,
    StateChanged,
)

# Widget glue
from .effects import effect
from .hooks import (
    ViewModelHandle,
    use_view_model,
)

# Types
from .types import (
    DataGateway,
    Reducer,
    StateCallback,
)

__version__ = "0.1.0a1"

__all__ = [
    # Actions and values
    "Action",
    "RequestRead",
    "RequestReset",
    "DisplayState",
    "GreetingSettings",
    "OperationFailedError",
    "failure_message",
    # Data
    "CounterStore",
    "CounterGateway",
    # Reducer and view model
    "GreetingReducer",
    "GreetingViewModel",
    "create_view_model",
    # State
    "State",
    "StateChanged",
    # Widget glue
    "effect",
    "ViewModelHandle",
    "use_view_model",
    # Types
    "DataGateway",
    "Reducer",
    "StateCallback",
]
