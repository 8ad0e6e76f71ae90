"""State persistence for pomobar."""

from .state_store import (
    InMemoryStateStore,
    JsonFileStateStore,
    StateLoadError,
    StateSaveError,
    StateStore,
)

__all__ = [
    "StateStore",
    "JsonFileStateStore",
    "InMemoryStateStore",
    "StateLoadError",
    "StateSaveError",
]
