"""Click signals delivered by the status bar host."""

from __future__ import annotations

from enum import Enum

# Mouse button numbers as sent by i3blocks-style hosts in BLOCK_BUTTON.
_BUTTONS = {
    "1": "toggle",
    "2": "restart",
    "3": "skip",
}


class Signal(str, Enum):
    """User action to apply during a tick."""

    NONE = "none"
    TOGGLE = "toggle"
    RESTART = "restart"
    SKIP = "skip"

    @classmethod
    def from_button(cls, value: str | None) -> Signal:
        """Map a button number to a signal; anything unrecognised is NONE."""
        if value is None:
            return cls.NONE
        return cls(_BUTTONS.get(value.strip(), "none"))
