"""Phase-completion notifications.

Notifications are fire-and-forget: each action is launched as a detached
process that is never waited on, and launch failures are logged and dropped.
"""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from pomobar.models.config_models import NotifierConfig
from pomobar.utils.logger import get_logger


class Notifier(ABC):
    """Abstract sink for desktop notifications and sounds."""

    @abstractmethod
    def notify(self, text: str) -> None:
        """Show *text* as an urgent desktop notification."""
        raise NotImplementedError("Notifier.notify() must be implemented by adapter")

    @abstractmethod
    def play_sound(self, path: Path) -> None:
        """Play the sound file at *path*."""
        raise NotImplementedError("Notifier.play_sound() must be implemented by adapter")


class NullNotifier(Notifier):
    """Notifier that does nothing (``--quiet``)."""

    def notify(self, text: str) -> None:
        get_logger().debug("notification suppressed: %s", text)

    def play_sound(self, path: Path) -> None:
        get_logger().debug("sound suppressed: %s", path)


class DesktopNotifier(Notifier):
    """Launches the configured notification and audio commands."""

    def __init__(self, config: NotifierConfig | None = None):
        self.config = config or NotifierConfig()

    def notify(self, text: str) -> None:
        self._launch(
            [
                self.config.notify_command,
                "--appname",
                self.config.app_name,
                "--urgency",
                self.config.urgency,
                text,
            ]
        )

    def play_sound(self, path: Path) -> None:
        self._launch([self.config.player_command, *self.config.player_args, str(path)])

    def _launch(self, args: list[str]) -> None:
        try:
            subprocess.Popen(
                args,
                start_new_session=True,  # Detach from parent session
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                stdin=subprocess.DEVNULL,
            )
        except OSError as e:
            get_logger().debug("failed to launch %s: %s", args[0], e)


def get_notifier(config: NotifierConfig) -> Notifier:
    """Pick the notifier for *config*."""
    if not config.enabled:
        return NullNotifier()
    return DesktopNotifier(config)
