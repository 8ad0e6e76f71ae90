"""State store abstraction and its implementations.

The store holds exactly one TimerState. Loading a store that has never been
written yields a zeroed state, not an error.
"""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path

from pomobar.errors import PomobarError
from pomobar.models.state import StateFormatError, TimerState
from pomobar.utils.logger import get_logger


class StateLoadError(PomobarError):
    """The state file exists but could not be read or decoded."""

    def __init__(self, path: Path | str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"while reading state file {path}: {reason}")


class StateSaveError(PomobarError):
    """The state file could not be written."""

    def __init__(self, path: Path | str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"while writing state file {path}: {reason}")


class StateStore(ABC):
    """Abstract base class for timer state persistence."""

    @abstractmethod
    def load(self) -> TimerState:
        """Load the stored state.

        Returns:
            The stored TimerState, or a zeroed TimerState if nothing is stored

        Raises:
            StateLoadError: If stored data exists but is unreadable or corrupt
        """
        raise NotImplementedError("StateStore.load() must be implemented by adapter")

    @abstractmethod
    def save(self, state: TimerState) -> None:
        """Overwrite the stored state.

        Raises:
            StateSaveError: If the state could not be written
        """
        raise NotImplementedError("StateStore.save() must be implemented by adapter")

    @abstractmethod
    def clear(self) -> bool:
        """Remove the stored state. Returns True if something was removed."""
        raise NotImplementedError("StateStore.clear() must be implemented by adapter")


class JsonFileStateStore(StateStore):
    """Stores the state as a JSON object in a single owner-only file.

    Writes overwrite the file in place; there is no locking, so callers must
    not run two ticks at once.
    """

    def __init__(self, state_file: Path):
        self.state_file = Path(state_file)

    def load(self) -> TimerState:
        try:
            content = self.state_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            get_logger().debug("No state file at %s, starting from zero state", self.state_file)
            return TimerState()
        except OSError as e:
            raise StateLoadError(self.state_file, str(e)) from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise StateLoadError(self.state_file, f"invalid JSON: {e}") from e

        try:
            return TimerState.from_dict(data)
        except StateFormatError as e:
            raise StateLoadError(self.state_file, str(e)) from e

    def save(self, state: TimerState) -> None:
        content = json.dumps(state.to_dict(), indent=2)
        try:
            self.state_file.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self.state_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            # O_CREAT's mode only applies to new files
            self.state_file.chmod(0o600)
        except OSError as e:
            raise StateSaveError(self.state_file, str(e)) from e

    def clear(self) -> bool:
        try:
            self.state_file.unlink()
        except FileNotFoundError:
            return False
        return True


class InMemoryStateStore(StateStore):
    """Keeps the serialised state in memory. Used by tests and dry runs."""

    def __init__(self, state: TimerState | None = None):
        self._data: dict | None = state.to_dict() if state is not None else None
        self.saves = 0

    def load(self) -> TimerState:
        if self._data is None:
            return TimerState()
        return TimerState.from_dict(dict(self._data))

    def save(self, state: TimerState) -> None:
        self._data = state.to_dict()
        self.saves += 1

    def clear(self) -> bool:
        existed = self._data is not None
        self._data = None
        return existed
