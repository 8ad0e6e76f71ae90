"""
Exit codes for pomobar.

The status bar host only distinguishes zero from nonzero, but scripts
wrapping pomobar can use the specific codes below.
"""

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid option value
ERROR_INVALID_ARGS = 2

# State file could not be read or is corrupt
ERROR_STATE_LOAD = 3


def get_exit_code_description(code: int) -> str:
    """Get a recovery hint for an exit code."""
    descriptions = {
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Check the option values (see 'pomobar --help')",
        ERROR_STATE_LOAD: "Run 'pomobar clear' to remove the state file and start over",
    }
    return descriptions.get(code, "Unknown error")
