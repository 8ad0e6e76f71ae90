"""Unit tests for pomobar.utils.exit_codes."""

from __future__ import annotations

from pomobar.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_STATE_LOAD,
    get_exit_code_description,
)


class TestConstants:
    def test_errors_are_nonzero_and_distinct(self):
        codes = [ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_STATE_LOAD]
        assert all(code != 0 for code in codes)
        assert len(set(codes)) == len(codes)


class TestDescriptions:
    def test_state_load_mentions_clear(self):
        assert "pomobar clear" in get_exit_code_description(ERROR_STATE_LOAD)

    def test_invalid_args_mentions_help(self):
        assert "--help" in get_exit_code_description(ERROR_INVALID_ARGS)

    def test_unknown(self):
        assert get_exit_code_description(-1) == "Unknown error"
