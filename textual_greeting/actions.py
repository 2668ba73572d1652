"""Actions understood by the greeting reducer."""

from dataclasses import dataclass
from typing import NoReturn


@dataclass(frozen=True, slots=True)
class RequestRead:
    """Fetch the next value from the gateway."""


@dataclass(frozen=True, slots=True)
class RequestReset:
    """Reset the data source. Emits no state."""


Action = RequestRead | RequestReset


def unknown_action(action: object) -> NoReturn:
    """Fallthrough for exhaustive matches over Action."""
    raise TypeError(f"Unknown action: {action!r}")
