"""pomobar - a pomodoro timer for status bars."""

__version__ = "0.1.0"
