"""Console utilities for pomobar."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(stderr: bool = False) -> Console:
    """Get a Rich Console instance for status and error output."""
    return Console(stderr=stderr, highlight=False, soft_wrap=True)
