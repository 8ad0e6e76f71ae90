"""Configuration assembly for pomobar."""

from __future__ import annotations

from pathlib import Path

from pomobar.models.config_models import (
    DisplayConfig,
    LoggingConfig,
    NotifierConfig,
    PomobarConfig,
    SoundConfig,
    StorageConfig,
)


def build_config(
    state_file: Path | None = None,
    notify_command: str | None = None,
    player_command: str | None = None,
    work_sound: Path | None = None,
    break_sound: Path | None = None,
    quiet: bool = False,
    log_level: str | None = None,
) -> PomobarConfig:
    """Build a PomobarConfig, overriding defaults with the values given.

    ``None`` keeps the default for that setting.
    """
    storage = StorageConfig() if state_file is None else StorageConfig(state_file=state_file)

    notifier_overrides: dict = {"enabled": not quiet}
    if notify_command:
        notifier_overrides["notify_command"] = notify_command
    if player_command:
        notifier_overrides["player_command"] = player_command

    sound_overrides: dict = {}
    if work_sound is not None:
        sound_overrides["work_done"] = work_sound
    if break_sound is not None:
        sound_overrides["break_done"] = break_sound

    return PomobarConfig(
        storage=storage,
        notifier=NotifierConfig(**notifier_overrides),
        sounds=SoundConfig(**sound_overrides),
        display=DisplayConfig(),
        logging=LoggingConfig() if log_level is None else LoggingConfig(level=log_level),
    )
