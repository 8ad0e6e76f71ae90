"""One tick of the pomodoro timer.

A tick loads the state, applies the click signal, advances time, prints
the status and persists. A phase that runs out is announced, cycled and
reset; the next phase waits for a toggle before it starts counting.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta

from pomobar.models.config_models import DisplayConfig, SoundConfig
from pomobar.models.phase import cycle, default_duration
from pomobar.models.signal import Signal
from pomobar.models.state import TimerState
from pomobar.repositories.state_store import StateSaveError, StateStore
from pomobar.services.notifier import Notifier
from pomobar.ui.formatters import print_status
from pomobar.utils.logger import get_logger


def _now() -> datetime:
    return datetime.now().astimezone()


class TickService:
    """Runs ticks against an injected store and notifier."""

    def __init__(
        self,
        store: StateStore,
        notifier: Notifier,
        sounds: SoundConfig | None = None,
        display: DisplayConfig | None = None,
        clock: Callable[[], datetime] = _now,
        output: Callable[[TimerState], None] | None = None,
    ):
        self.store = store
        self.notifier = notifier
        self.sounds = sounds or SoundConfig()
        self.display = display or DisplayConfig()
        self.clock = clock
        self.output = output or (lambda state: print_status(state, self.display))

    def tick(self, signal: Signal = Signal.NONE) -> TimerState:
        """Run one tick and return the resulting state.

        Raises:
            StateLoadError: If the stored state is unreadable or corrupt
        """
        state = self.store.load()
        state.now = self.clock()

        if not state.is_initialized:
            get_logger().info("no previous tick, resetting to %s", state.phase.value)
            self.reset(state)

        self.apply_signal(state, signal)

        if state.is_ticking:
            state.remaining -= state.now - state.last_tick_time
        state.last_tick_time = state.now

        if state.remaining < timedelta(0):
            self.output(state)
            self.finish(state)
            self.reset(state)
        else:
            self.output(state)

        # A stopped timer was already written by the reset that stopped it.
        if state.running:
            self._save(state)

        return state

    def apply_signal(self, state: TimerState, signal: Signal) -> None:
        """Apply a click signal to *state* in place."""
        if signal is Signal.TOGGLE:
            if state.running:
                state.paused = not state.paused
            else:
                state.running = True
            state.last_tick_time = state.now
        elif signal is Signal.RESTART:
            self.reset(state)
        elif signal is Signal.SKIP:
            state.phase = cycle(state.phase)
            self.reset(state)
        else:
            return
        get_logger().info(
            "applied %s: phase=%s running=%s paused=%s",
            signal.value,
            state.phase.value,
            state.running,
            state.paused,
        )

    def reset(self, state: TimerState) -> None:
        """Stop the timer, reload the phase's full duration and persist."""
        state.running = False
        state.paused = False
        state.last_tick_time = state.now
        state.remaining = default_duration(state.phase)
        self._save(state)

    def finish(self, state: TimerState) -> None:
        """Announce the end of the current phase and move to the next one."""
        completed = state.phase
        state.phase = cycle(completed)
        get_logger().info("%s completed, next is %s", completed.value, state.phase.value)

        self.notifier.notify(f"{state.phase.info.long_label}!")
        self.notifier.play_sound(self.sounds.for_kind(completed.completion_sound))

    def _save(self, state: TimerState) -> None:
        try:
            self.store.save(state)
        except StateSaveError as e:
            get_logger().warning("%s", e)
