"""Main entry point for pomobar.

Run ``pomobar`` from an i3blocks-style status bar once per second. Clicks
arrive through ``BLOCK_BUTTON``: 1 toggles, 2 restarts the phase and 3 skips
to the next phase.
"""

from pathlib import Path

import typer
from pydantic import ValidationError

from pomobar import __version__
from pomobar.commands.decorators import AppError, command_wrapper
from pomobar.config import build_config
from pomobar.models.config_models import PomobarConfig
from pomobar.models.signal import Signal
from pomobar.repositories.state_store import JsonFileStateStore, StateLoadError
from pomobar.services.notifier import get_notifier
from pomobar.services.tick_service import TickService
from pomobar.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_STATE_LOAD
from pomobar.utils.logger import set_log_level
from pomobar.utils.ui.console import get_console

app = typer.Typer(
    name="pomobar",
    help="Pomodoro timer for status bars",
    add_completion=False,
)


def get_tick_service(config: PomobarConfig) -> TickService:
    """Wire a TickService to the file store and notifier from *config*."""
    return TickService(
        store=JsonFileStateStore(config.storage.state_file),
        notifier=get_notifier(config.notifier),
        sounds=config.sounds,
        display=config.display,
    )


def run_tick(config: PomobarConfig, signal: Signal) -> None:
    try:
        get_tick_service(config).tick(signal)
    except StateLoadError as e:
        raise AppError(str(e), exit_code=ERROR_STATE_LOAD) from e


@app.callback(invoke_without_command=True)
@command_wrapper
def main(
    ctx: typer.Context,
    button: str | None = typer.Option(
        None,
        "--button",
        envvar="BLOCK_BUTTON",
        help="Clicked button: 1 toggle, 2 restart, 3 skip",
    ),
    state_file: Path | None = typer.Option(
        None, "--state-file", envvar="POMOBAR_STATE_FILE", help="Timer state file"
    ),
    notify_command: str | None = typer.Option(
        None,
        "--notify-command",
        envvar="POMOBAR_NOTIFY_COMMAND",
        help="Desktop notification command",
    ),
    player_command: str | None = typer.Option(
        None, "--player-command", envvar="POMOBAR_PLAYER_COMMAND", help="Audio player"
    ),
    work_sound: Path | None = typer.Option(
        None,
        "--work-sound",
        envvar="POMOBAR_WORK_SOUND",
        help="Sound played when a pomodoro ends",
    ),
    break_sound: Path | None = typer.Option(
        None,
        "--break-sound",
        envvar="POMOBAR_BREAK_SOUND",
        help="Sound played when a break ends",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet/--no-quiet",
        envvar="POMOBAR_QUIET",
        help="No notification or sound",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        envvar="POMOBAR_LOG_LEVEL",
        help="Log file level: DEBUG, INFO, WARNING, ERROR or CRITICAL",
    ),
) -> None:
    """Print the timer status, applying the clicked button if any."""
    try:
        ctx.obj = build_config(
            state_file=state_file,
            notify_command=notify_command,
            player_command=player_command,
            work_sound=work_sound,
            break_sound=break_sound,
            quiet=quiet,
            log_level=log_level,
        )
    except ValidationError as e:
        raise AppError(
            f"invalid option: {e.errors()[0]['msg']}", exit_code=ERROR_INVALID_ARGS
        ) from e
    set_log_level(ctx.obj.logging.level)
    if ctx.invoked_subcommand is None:
        run_tick(ctx.obj, Signal.from_button(button))


@app.command()
@command_wrapper
def toggle(ctx: typer.Context) -> None:
    """Start, pause or resume the timer."""
    run_tick(ctx.obj, Signal.TOGGLE)


@app.command()
@command_wrapper
def restart(ctx: typer.Context) -> None:
    """Stop the timer and restore the current phase's full length."""
    run_tick(ctx.obj, Signal.RESTART)


@app.command()
@command_wrapper
def skip(ctx: typer.Context) -> None:
    """Move to the next phase without completing this one."""
    run_tick(ctx.obj, Signal.SKIP)


@app.command()
@command_wrapper
def clear(ctx: typer.Context) -> None:
    """Delete the state file, e.g. after it was corrupted."""
    store = JsonFileStateStore(ctx.obj.storage.state_file)
    console = get_console()
    if store.clear():
        console.print(f"Removed {store.state_file}", markup=False)
    else:
        console.print(f"No state file at {store.state_file}", markup=False)


@app.command()
def version() -> None:
    """Show version information."""
    get_console().print(f"[bold]pomobar[/bold] version [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
