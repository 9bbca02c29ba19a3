"""Unit tests for command decorators."""

from unittest.mock import patch

import pytest
import typer

from lifesync.commands.decorators import command_wrapper
from lifesync.models.exceptions import AppError, NotFoundError, ValidationError


class TestCommandWrapper:
    def test_returns_result(self):
        @command_wrapper
        def cmd():
            return 42

        assert cmd() == 42

    def test_preserves_name(self):
        @command_wrapper
        def my_command():
            """Docstring."""

        assert my_command.__name__ == "my_command"
        assert my_command.__doc__ == "Docstring."

    def test_called_with_parentheses(self):
        @command_wrapper()
        def cmd(value):
            return value * 2

        assert cmd(3) == 6

    @pytest.mark.parametrize(
        ("error", "code"),
        [(AppError("boom"), 1), (ValidationError("bad"), 2), (NotFoundError("gone"), 5)],
    )
    def test_app_error_becomes_exit_code(self, error, code):
        @command_wrapper
        def cmd():
            raise error

        with patch("lifesync.commands.decorators.format_error") as format_error:
            with pytest.raises(typer.Exit) as exc_info:
                cmd()

        assert exc_info.value.exit_code == code
        format_error.assert_called_once_with(str(error))

    def test_typer_exit_passes_through(self):
        @command_wrapper
        def cmd():
            raise typer.Exit(0)

        with pytest.raises(typer.Exit) as exc_info:
            cmd()
        assert exc_info.value.exit_code == 0

    def test_unexpected_error_is_general_failure(self):
        @command_wrapper
        def cmd():
            raise KeyError("oops")

        with patch("lifesync.commands.decorators.format_error") as format_error:
            with pytest.raises(typer.Exit) as exc_info:
                cmd()

        assert exc_info.value.exit_code == 1
        assert "An unexpected error occurred" in format_error.call_args.args[0]
