"""Go source parsing: tree-sitter Go grammar mapped onto a declaration model."""

from __future__ import annotations

from structschema.source.nodes import (
    STRUCT_TYPE,
    TYPE_IDENTIFIER,
    Comment,
    Field,
    SourceFile,
    TypeDecl,
    TypeExpr,
)
from structschema.source.parser import (
    DeclarationReader,
    get_parser,
    parse_file,
    parse_source,
    unquote,
)

__all__ = [
    # Parsing
    "parse_file",
    "parse_source",
    "get_parser",
    "unquote",
    "DeclarationReader",
    # Declarations
    "SourceFile",
    "TypeDecl",
    "Field",
    "TypeExpr",
    "Comment",
    "STRUCT_TYPE",
    "TYPE_IDENTIFIER",
]
