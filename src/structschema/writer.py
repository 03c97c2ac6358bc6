"""Persist rendered schemas to disk."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import structlog

from structschema.errors import SchemaWriteError

logger = structlog.get_logger(__name__)

SCHEMA_SUFFIX = ".schema.json"

# rw-r--r--
FILE_MODE = 0o644


def output_filename(type_name: str) -> str:
    """Return the schema file name for a type.

    Example:
        >>> output_filename("User")
        'user.schema.json'
    """
    return type_name.lower() + SCHEMA_SUFFIX


def _replace_atomically(path: Path, data: bytes) -> None:
    # Temp file lives in the target directory so os.replace stays on one filesystem
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_path, FILE_MODE)
        os.replace(tmp_path, path)
    finally:
        # Gone already after a successful replace
        tmp_path.unlink(missing_ok=True)


def write_schema(text: str, type_name: str, output_dir: Path | str = ".") -> Path:
    """Write rendered schema text next to the other generated files.

    The text is written to a temporary file that then replaces the target,
    so an existing schema is either fully replaced or left untouched. The
    file ends up with mode 0644 whether or not it existed before.

    Args:
        text: Rendered JSON Schema text.
        type_name: Go type name, used to derive the file name.
        output_dir: Directory to write into (default: current directory).

    Returns:
        Path of the written file.

    Raises:
        SchemaWriteError: If the text cannot be encoded or the file cannot
            be written.
    """
    path = Path(output_dir) / output_filename(type_name)
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise SchemaWriteError(
            str(path), "schema text is not valid UTF-8", internal_details=repr(e)
        ) from e

    try:
        _replace_atomically(path, data)
    except PermissionError as e:
        raise SchemaWriteError(str(path), "permission denied", internal_details=repr(e)) from e
    except FileNotFoundError as e:
        raise SchemaWriteError(str(path), "directory does not exist", internal_details=repr(e)) from e
    except OSError as e:
        raise SchemaWriteError(str(path), e.strerror or str(e), internal_details=repr(e)) from e

    logger.debug("schema_written", path=str(path), size=len(data))
    return path
