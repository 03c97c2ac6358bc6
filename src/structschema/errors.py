"""Exception hierarchy for structschema.

This module defines the exception classes raised by the generation
pipeline:
- StructSchemaError: Base exception for all structschema errors
- ParseError: Raised when the Go source file is not valid syntax
- NotFoundError: Raised when the requested struct type does not exist
- RenderError: Raised when the schema template cannot be applied
- SchemaWriteError: Raised when the schema file cannot be written

User-facing messages are safe to print from the CLI. Technical details
(exception reprs, offsets) are logged via structlog when provided.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

logger = structlog.get_logger(__name__)


class StructSchemaError(Exception):
    """Base exception for structschema.

    Args:
        user_message: Message to display to the user.
        internal_details: Optional technical details, logged but not
            part of the message.

    Example:
        >>> raise StructSchemaError(
        ...     "Schema generation failed",
        ...     internal_details="KeyError('fields') in template context",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize StructSchemaError with user message and optional details.

        Args:
            user_message: Message to display to the user.
            internal_details: Technical details for logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "structschema_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class ParseError(StructSchemaError):
    """Raised when a source file cannot be parsed.

    Attributes:
        file_path: Path of the file being parsed.
        line: 1-based line of the syntax problem (if known).
        column: 1-based column of the syntax problem (if known).
        problem: Description of the syntax problem.

    Example:
        >>> raise ParseError("user.go", "unterminated raw string", line=7, column=23)
        # User sees: "user.go:7:23: unterminated raw string"
    """

    def __init__(
        self,
        file_path: str,
        problem: str,
        *,
        line: int | None = None,
        column: int | None = None,
        internal_details: str | None = None,
    ) -> None:
        """Initialize ParseError with location context.

        Args:
            file_path: Path of the file being parsed.
            problem: Description of the syntax problem.
            line: 1-based line number (optional).
            column: 1-based column number (optional).
            internal_details: Technical details for logging only.
        """
        location = file_path
        if line is not None:
            location = f"{location}:{line}"
            if column is not None:
                location = f"{location}:{column}"

        super().__init__(f"{location}: {problem}", internal_details=internal_details)

        self.file_path = file_path
        self.problem = problem
        self.line = line
        self.column = column


class NotFoundError(StructSchemaError):
    """Raised when the requested struct type is not declared in a file.

    A declaration with the right name but a non-struct type (alias,
    interface, named basic type) counts as not found.

    Attributes:
        type_name: Name of the requested type.
        file_path: Path of the searched file.
        available: Struct types that are declared in the file.

    Example:
        >>> raise NotFoundError("Account", "user.go", available=["User"])
        # User sees: "Type Account not found in user.go (structs available: User)"
    """

    def __init__(
        self,
        type_name: str,
        file_path: str,
        *,
        available: Sequence[str] = (),
        internal_details: str | None = None,
    ) -> None:
        """Initialize NotFoundError with the searched type and file.

        Args:
            type_name: Name of the requested type.
            file_path: Path of the searched file.
            available: Names of the struct types found in the file.
            internal_details: Technical details for logging only.
        """
        message = f"Type {type_name} not found in {file_path}"
        if available:
            message = f"{message} (structs available: {', '.join(available)})"

        super().__init__(message, internal_details=internal_details)

        self.type_name = type_name
        self.file_path = file_path
        self.available = list(available)


class RenderError(StructSchemaError):
    """Raised when the JSON Schema template cannot be applied.

    Should not occur for well-formed SchemaSpec values.
    """

    pass


class SchemaWriteError(StructSchemaError):
    """Raised when the rendered schema cannot be written to disk.

    Covers permission problems, missing directories, full disks and
    invalid paths.

    Attributes:
        path: Output path that could not be written.
    """

    def __init__(
        self,
        path: str,
        reason: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize SchemaWriteError.

        Args:
            path: Output path that could not be written.
            reason: Short description of the failure.
            internal_details: Technical details for logging only.
        """
        super().__init__(
            f"Cannot write schema to {path}: {reason}",
            internal_details=internal_details,
        )
        self.path = path
