"""Unit tests for pomobar.models.phase.

Covers the eight-step cycle, the per-phase attribute table and the
fallbacks for unknown values.
"""

from __future__ import annotations

from datetime import timedelta

import pytest

from pomobar.models.phase import (
    LONG_BREAK_LENGTH,
    POMODORO_LENGTH,
    SHORT_BREAK_LENGTH,
    Phase,
    cycle,
    default_duration,
    phase_info,
)

POMODOROS = [Phase.POMODORO_1, Phase.POMODORO_2, Phase.POMODORO_3, Phase.POMODORO_4]
SHORT_BREAKS = [Phase.SHORT_BREAK, Phase.SHORT_BREAK_2, Phase.SHORT_BREAK_3]


# ---------------------------------------------------------------------------
# cycle()
# ---------------------------------------------------------------------------


class TestCycle:
    @pytest.mark.parametrize(
        "phase, expected",
        [
            (Phase.POMODORO_1, Phase.SHORT_BREAK),
            (Phase.SHORT_BREAK, Phase.POMODORO_2),
            (Phase.POMODORO_2, Phase.SHORT_BREAK_2),
            (Phase.SHORT_BREAK_2, Phase.POMODORO_3),
            (Phase.POMODORO_3, Phase.SHORT_BREAK_3),
            (Phase.SHORT_BREAK_3, Phase.POMODORO_4),
            (Phase.POMODORO_4, Phase.LONG_BREAK),
            (Phase.LONG_BREAK, Phase.POMODORO_1),
        ],
    )
    def test_next_phase(self, phase, expected):
        assert cycle(phase) == expected

    @pytest.mark.parametrize("phase", list(Phase))
    def test_eight_steps_return_to_start(self, phase):
        current = phase
        for _ in range(8):
            current = cycle(current)
        assert current == phase

    @pytest.mark.parametrize("phase", list(Phase))
    def test_no_shorter_period(self, phase):
        seen = []
        current = phase
        for _ in range(8):
            seen.append(current)
            current = cycle(current)
        assert len(set(seen)) == 8

    def test_pomodoros_alternate_with_breaks(self):
        current = Phase.POMODORO_1
        for _ in range(8):
            nxt = cycle(current)
            assert nxt.is_break != current.is_break
            current = nxt


# ---------------------------------------------------------------------------
# Attribute table
# ---------------------------------------------------------------------------


class TestPhaseInfo:
    @pytest.mark.parametrize(
        "phase, short, long",
        [
            (Phase.POMODORO_1, "P1", "POMODORO"),
            (Phase.POMODORO_2, "P2", "POMODORO 2"),
            (Phase.POMODORO_3, "P3", "POMODORO 3"),
            (Phase.POMODORO_4, "P4", "POMODORO 4"),
            (Phase.SHORT_BREAK, "SB", "SHORT BREAK"),
            (Phase.SHORT_BREAK_2, "SB2", "SHORT BREAK 2"),
            (Phase.SHORT_BREAK_3, "SB3", "SHORT BREAK 3"),
            (Phase.LONG_BREAK, "LB", "LONG BREAK"),
        ],
    )
    def test_labels(self, phase, short, long):
        info = phase_info(phase)
        assert info.short_label == short
        assert info.long_label == long

    @pytest.mark.parametrize("phase", POMODOROS)
    def test_pomodoro_duration(self, phase):
        assert default_duration(phase) == timedelta(minutes=25)

    @pytest.mark.parametrize("phase", SHORT_BREAKS)
    def test_short_break_duration(self, phase):
        assert default_duration(phase) == timedelta(minutes=5)

    def test_long_break_duration(self):
        assert default_duration(Phase.LONG_BREAK) == timedelta(minutes=15)

    def test_length_constants(self):
        assert POMODORO_LENGTH == timedelta(minutes=25)
        assert SHORT_BREAK_LENGTH == timedelta(minutes=5)
        assert LONG_BREAK_LENGTH == timedelta(minutes=15)

    @pytest.mark.parametrize("phase", POMODOROS)
    def test_pomodoro_sound(self, phase):
        assert phase.completion_sound == "work_done"
        assert not phase.is_break

    @pytest.mark.parametrize("phase", SHORT_BREAKS + [Phase.LONG_BREAK])
    def test_break_sound(self, phase):
        assert phase.completion_sound == "break_done"
        assert phase.is_break

    def test_short_labels_fit_status_bar(self):
        for phase in Phase:
            assert 2 <= len(phase.info.short_label) <= 3


# ---------------------------------------------------------------------------
# Fallbacks
# ---------------------------------------------------------------------------


class TestUnknownValues:
    def test_unknown_value_is_first_pomodoro(self):
        assert Phase("clock_9") is Phase.POMODORO_1

    def test_known_value_round_trips(self):
        for phase in Phase:
            assert Phase(phase.value) is phase

    def test_phase_info_falls_back_to_first_pomodoro(self):
        info = phase_info("not-a-phase")
        assert info.short_label == "P1"
        assert info.long_label == "POMODORO"
        assert info.duration == timedelta(minutes=25)

    def test_cycle_of_unknown_behaves_like_first_pomodoro(self):
        assert cycle("not-a-phase") == Phase.SHORT_BREAK
