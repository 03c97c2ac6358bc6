"""CLI error handling for structschema.

Wraps pipeline exceptions into a ClickException that prints through the
Rich console and exits with a non-zero status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click
from pydantic import ValidationError as PydanticValidationError

from structschema.cli.output import error
from structschema.errors import StructSchemaError

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails


EXIT_FAILURE = 1  # Every failure is fatal and reported the same way


class CLIError(click.ClickException):
    """CLI-specific exception with exit code support.

    Attributes:
        message: User-facing error message.
        exit_code: Exit code for the CLI (default: 1).
    """

    def __init__(self, message: str, exit_code: int = EXIT_FAILURE) -> None:
        """Initialize CLIError.

        Args:
            message: User-facing error message.
            exit_code: Exit code for the CLI.
        """
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: object = None) -> None:
        """Display the error message using Rich formatting.

        Args:
            file: Output file (unused, for Click compatibility).
        """
        error(self.format_message())


def format_pydantic_error(err: PydanticValidationError) -> str:
    """Format Pydantic validation error into user-friendly message.

    Args:
        err: Pydantic ValidationError instance.

    Returns:
        Formatted error message with field paths and issues.

    Example:
        >>> format_pydantic_error(err)
        "Validation failed:\\n  - log_level: Value error, Unknown log level: LOUD"
    """
    errors: list[ErrorDetails] = err.errors()
    lines = ["Validation failed:"]

    for e in errors:
        loc = ".".join(str(x) for x in e["loc"])
        msg = e["msg"]
        lines.append(f"  - {loc}: {msg}")

    return "\n".join(lines)


def handle_settings_error(err: PydanticValidationError) -> NoReturn:
    """Handle invalid STRUCTSCHEMA_* settings.

    Raises:
        CLIError: Always raises with formatted error message.
    """
    raise CLIError(f"Invalid settings:\n{format_pydantic_error(err)}")


def handle_generation_error(err: StructSchemaError) -> NoReturn:
    """Turn a pipeline error into a CLI failure.

    Raises:
        CLIError: Always raises with the error's user message.
    """
    raise CLIError(err.user_message) from None
