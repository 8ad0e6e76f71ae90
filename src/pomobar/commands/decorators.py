"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from pomobar.ui.formatters import format_error, format_hint
from pomobar.utils.exit_codes import ERROR_GENERAL, get_exit_code_description
from pomobar.utils.logger import get_logger


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable):
    """Log command timing and turn errors into an stderr message and exit code."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.debug("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.debug("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except AppError as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(str(e))
            if e.exit_code != ERROR_GENERAL:
                format_hint(get_exit_code_description(e.exit_code))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
