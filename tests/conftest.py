"""Shared test fixtures and configuration.

Keeps tests away from the real log directory, the real state file and real
notification processes.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import patch

import pytest

from pomobar.repositories.state_store import InMemoryStateStore, JsonFileStateStore
from pomobar.services.notifier import Notifier

T0 = datetime(2024, 3, 1, 9, 0, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------


class RecordingNotifier(Notifier):
    """Notifier that records calls instead of launching processes."""

    def __init__(self):
        self.notifications: list[str] = []
        self.sounds: list[Path] = []

    def notify(self, text: str) -> None:
        self.notifications.append(text)

    def play_sound(self, path: Path) -> None:
        self.sounds.append(path)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime = T0):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> datetime:
        self.current += timedelta(**kwargs)
        return self.current


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Send the application log to *tmp_path* and reset the singleton."""
    import pomobar.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("pomobar").handlers.clear()
    with patch("pomobar.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    logger_mod._logger = None
    logging.getLogger("pomobar").handlers.clear()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def memory_store() -> InMemoryStateStore:
    return InMemoryStateStore()


@pytest.fixture()
def state_file(tmp_path) -> Path:
    return tmp_path / "state" / "state.json"


@pytest.fixture()
def file_store(state_file) -> JsonFileStateStore:
    return JsonFileStateStore(state_file)
