"""Persisted timer state."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from .phase import Phase


class StateFormatError(ValueError):
    """Raised when a state record cannot be decoded."""


def _timedelta_to_us(value: timedelta) -> int:
    return (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds


@dataclass
class TimerState:
    """State of the pomodoro timer between two ticks.

    ``last_tick_time`` of ``None`` is the zero timestamp: the timer has never
    been initialised (or was left idle, which is never persisted).
    ``now`` is the time of the current tick and is not persisted.
    """

    running: bool = False
    paused: bool = False
    remaining: timedelta = field(default_factory=timedelta)
    last_tick_time: datetime | None = None
    phase: Phase = Phase.POMODORO_1
    now: datetime | None = field(default=None, compare=False, repr=False)

    @property
    def is_ticking(self) -> bool:
        """Whether elapsed time counts against ``remaining``."""
        return self.running and not self.paused

    @property
    def is_initialized(self) -> bool:
        return self.last_tick_time is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serialisable dictionary."""
        return {
            "running": self.running,
            "paused": self.paused,
            "remaining_us": _timedelta_to_us(self.remaining),
            "last_tick_time": (
                self.last_tick_time.isoformat()
                if self.last_tick_time is not None
                else None
            ),
            "phase": self.phase.value,
        }

    @classmethod
    def from_dict(cls, data: Any) -> TimerState:
        """Create from a dictionary, raising StateFormatError on bad input.

        Missing keys take their zero values.
        """
        if not isinstance(data, dict):
            raise StateFormatError(f"expected an object, got {type(data).__name__}")

        running = data.get("running", False)
        paused = data.get("paused", False)
        if not isinstance(running, bool) or not isinstance(paused, bool):
            raise StateFormatError("'running' and 'paused' must be booleans")

        remaining_us = data.get("remaining_us", 0)
        if isinstance(remaining_us, bool) or not isinstance(remaining_us, int):
            raise StateFormatError("'remaining_us' must be an integer")

        raw_time = data.get("last_tick_time")
        if raw_time is None:
            last_tick_time = None
        elif isinstance(raw_time, str):
            try:
                last_tick_time = datetime.fromisoformat(raw_time.replace("Z", "+00:00"))
            except ValueError as e:
                raise StateFormatError(f"invalid 'last_tick_time': {raw_time!r}") from e
            if last_tick_time.tzinfo is None:
                # Naive timestamps are local time
                last_tick_time = last_tick_time.astimezone()
        else:
            raise StateFormatError("'last_tick_time' must be a string or null")

        raw_phase = data.get("phase", Phase.POMODORO_1.value)
        if not isinstance(raw_phase, str):
            raise StateFormatError("'phase' must be a string")

        try:
            remaining = timedelta(microseconds=remaining_us)
        except OverflowError as e:
            raise StateFormatError("'remaining_us' is out of range") from e

        return cls(
            running=running,
            # paused is meaningless on a stopped timer
            paused=paused and running,
            remaining=remaining,
            last_tick_time=last_tick_time,
            phase=Phase(raw_phase),
        )
