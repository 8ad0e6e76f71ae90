"""Domain models for pomobar."""

from .phase import Phase, PhaseInfo, cycle, default_duration, phase_info
from .signal import Signal
from .state import StateFormatError, TimerState

__all__ = [
    "Phase",
    "PhaseInfo",
    "Signal",
    "StateFormatError",
    "TimerState",
    "cycle",
    "default_duration",
    "phase_info",
]
