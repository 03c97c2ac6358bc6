"""Locate a named struct type in a parsed source file."""

from __future__ import annotations

from collections.abc import Iterator

import structlog

from structschema.errors import NotFoundError
from structschema.source import SourceFile, TypeDecl

logger = structlog.get_logger(__name__)


def iter_type_decls(source: SourceFile) -> Iterator[TypeDecl]:
    """Yield top-level type declarations in source order."""
    yield from source.type_decls


def struct_names(source: SourceFile) -> list[str]:
    """Return the names of all struct types declared in a file."""
    return [decl.name for decl in iter_type_decls(source) if decl.is_struct]


def find_struct(source: SourceFile, type_name: str) -> TypeDecl:
    """Find the first struct declaration named ``type_name``.

    Declarations with a matching name whose type is not a struct (aliases,
    interfaces, named basic types) are skipped and the search continues.

    Args:
        source: Parsed source file.
        type_name: Name of the struct type to find.

    Returns:
        The matching TypeDecl.

    Raises:
        NotFoundError: If no struct type with that name is declared.

    Example:
        >>> decl = find_struct(parse_file("user.go"), "User")
        >>> decl.line
        5
    """
    for decl in iter_type_decls(source):
        if decl.name != type_name:
            continue
        if not decl.is_struct:
            logger.debug(
                "type_not_struct",
                type_name=type_name,
                line=decl.line,
                declared=str(decl.type),
                alias=decl.is_alias,
            )
            continue
        logger.debug("type_found", type_name=type_name, line=decl.line)
        return decl

    raise NotFoundError(type_name, source.path, available=struct_names(source))
