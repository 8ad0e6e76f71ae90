"""Configuration models for pomobar.

Values come from CLI options and environment variables only; there is
no configuration file.
"""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_runtime_dir
from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_SOUND_DIR = Path("/usr/share/sounds/freedesktop/stereo")


def default_state_file() -> Path:
    """Fixed per-user location of the state file."""
    return Path(user_runtime_dir("pomobar")) / "state.json"


class StorageConfig(BaseModel):
    """Where the timer state lives."""

    state_file: Path = Field(default_factory=default_state_file)


class NotifierConfig(BaseModel):
    """External commands fired when a phase completes."""

    enabled: bool = Field(default=True)
    notify_command: str = Field(default="dunstify")
    app_name: str = Field(default="Pomodoro")
    urgency: str = Field(default="2", description="2 is critical for dunstify")
    player_command: str = Field(default="mpv")
    player_args: list[str] = Field(default_factory=lambda: ["--no-terminal", "--no-video"])


class SoundConfig(BaseModel):
    """Sound files keyed by the kind of phase that completed."""

    work_done: Path = Field(default=_SOUND_DIR / "complete.oga")
    break_done: Path = Field(default=_SOUND_DIR / "bell.oga")

    def for_kind(self, kind: str) -> Path:
        return self.break_done if kind == "break_done" else self.work_done


class DisplayConfig(BaseModel):
    """Status line glyphs (Nerd Font)."""

    icon_running: str = Field(default="")
    icon_paused: str = Field(default="")


class LoggingConfig(BaseModel):
    """Application log settings."""

    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(_LOG_LEVELS)}")
        return level


class PomobarConfig(BaseModel):
    """Main configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    notifier: NotifierConfig = Field(default_factory=NotifierConfig)
    sounds: SoundConfig = Field(default_factory=SoundConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
