"""Exceptions raised by pomobar."""


class PomobarError(Exception):
    """Base class for pomobar errors."""
