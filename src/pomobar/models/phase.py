"""Clock phases of the pomodoro cycle.

The cycle is four pomodoros separated by three short breaks, closed by one
long break::

    P1 -> SB -> P2 -> SB2 -> P3 -> SB3 -> P4 -> LB -> P1
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Literal

SoundKind = Literal["work_done", "break_done"]

POMODORO_LENGTH = timedelta(minutes=25)
SHORT_BREAK_LENGTH = timedelta(minutes=5)
LONG_BREAK_LENGTH = timedelta(minutes=15)


class Phase(str, Enum):
    """One of the eight fixed timer segments."""

    POMODORO_1 = "pomodoro_1"
    SHORT_BREAK = "short_break"
    POMODORO_2 = "pomodoro_2"
    SHORT_BREAK_2 = "short_break_2"
    POMODORO_3 = "pomodoro_3"
    SHORT_BREAK_3 = "short_break_3"
    POMODORO_4 = "pomodoro_4"
    LONG_BREAK = "long_break"

    @classmethod
    def _missing_(cls, value):
        # Unknown values behave like the first pomodoro.
        return cls.POMODORO_1

    @property
    def info(self) -> PhaseInfo:
        return phase_info(self)

    @property
    def is_break(self) -> bool:
        return self in _BREAKS

    @property
    def completion_sound(self) -> SoundKind:
        """Sound played when this phase runs out."""
        return "break_done" if self.is_break else "work_done"


@dataclass(frozen=True)
class PhaseInfo:
    """Display and timing attributes of a phase."""

    short_label: str
    long_label: str
    duration: timedelta


_BREAKS = frozenset({Phase.SHORT_BREAK, Phase.SHORT_BREAK_2, Phase.SHORT_BREAK_3, Phase.LONG_BREAK})

_NEXT: dict[Phase, Phase] = {
    Phase.POMODORO_1: Phase.SHORT_BREAK,
    Phase.SHORT_BREAK: Phase.POMODORO_2,
    Phase.POMODORO_2: Phase.SHORT_BREAK_2,
    Phase.SHORT_BREAK_2: Phase.POMODORO_3,
    Phase.POMODORO_3: Phase.SHORT_BREAK_3,
    Phase.SHORT_BREAK_3: Phase.POMODORO_4,
    Phase.POMODORO_4: Phase.LONG_BREAK,
    Phase.LONG_BREAK: Phase.POMODORO_1,
}

_INFO: dict[Phase, PhaseInfo] = {
    Phase.POMODORO_1: PhaseInfo("P1", "POMODORO", POMODORO_LENGTH),
    Phase.POMODORO_2: PhaseInfo("P2", "POMODORO 2", POMODORO_LENGTH),
    Phase.POMODORO_3: PhaseInfo("P3", "POMODORO 3", POMODORO_LENGTH),
    Phase.POMODORO_4: PhaseInfo("P4", "POMODORO 4", POMODORO_LENGTH),
    Phase.SHORT_BREAK: PhaseInfo("SB", "SHORT BREAK", SHORT_BREAK_LENGTH),
    Phase.SHORT_BREAK_2: PhaseInfo("SB2", "SHORT BREAK 2", SHORT_BREAK_LENGTH),
    Phase.SHORT_BREAK_3: PhaseInfo("SB3", "SHORT BREAK 3", SHORT_BREAK_LENGTH),
    Phase.LONG_BREAK: PhaseInfo("LB", "LONG BREAK", LONG_BREAK_LENGTH),
}


def cycle(phase: Phase) -> Phase:
    """Return the phase that follows *phase*."""
    return _NEXT.get(phase, Phase.SHORT_BREAK)


def phase_info(phase: Phase) -> PhaseInfo:
    """Return the attributes of *phase*, falling back to the first pomodoro."""
    return _INFO.get(phase, _INFO[Phase.POMODORO_1])


def default_duration(phase: Phase) -> timedelta:
    """Full length of *phase*."""
    return phase_info(phase).duration
