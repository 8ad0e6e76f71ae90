"""Status line formatting for the status bar host."""

from __future__ import annotations

from datetime import timedelta

from rich.markup import escape

from pomobar.models.config_models import DisplayConfig
from pomobar.models.state import TimerState
from pomobar.utils.ui.console import get_console


def round_to_seconds(value: timedelta) -> int:
    """Round to the nearest whole second, halves away from zero."""
    us = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
    sign = -1 if us < 0 else 1
    return sign * ((abs(us) + 500_000) // 1_000_000)


def format_duration(value: timedelta) -> str:
    """Render a duration compactly, e.g. ``25m0s``, ``59s``, ``-3s``, ``1h0m0s``."""
    total = round_to_seconds(value)
    if total == 0:
        return "0s"

    sign = "-" if total < 0 else ""
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)

    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"


def format_status(state: TimerState, display: DisplayConfig | None = None) -> str:
    """Format the one-line status: ``<short label> <icon> <remaining>``."""
    display = display or DisplayConfig()
    icon = display.icon_running if state.is_ticking else display.icon_paused
    return f"{state.phase.info.short_label} {icon} {format_duration(state.remaining)}"


def print_status(state: TimerState, display: DisplayConfig | None = None) -> None:
    """Print the status twice: full text line, then short text line."""
    line = format_status(state, display)
    console = get_console()
    console.print(line, markup=False)
    console.print(line, markup=False)


def format_error(message: str) -> None:
    """Format and display an error message on stderr."""
    get_console(stderr=True).print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_hint(message: str) -> None:
    """Display a recovery hint on stderr below an error."""
    get_console(stderr=True).print(f"[dim]Hint:[/dim] {escape(message)}")
