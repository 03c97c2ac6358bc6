"""Declaration model for parsed Go source.

A thin, immutable view over the tree-sitter syntax tree: only what the
locator and the extractor read is kept. Function bodies and const/var
initializers never appear here.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# tree-sitter-go node types the extractor distinguishes
TYPE_IDENTIFIER = "type_identifier"
STRUCT_TYPE = "struct_type"


@dataclass(frozen=True)
class Comment:
    """A source comment. Text includes the comment markers."""

    text: str
    line: int
    column: int


@dataclass(frozen=True)
class TypeExpr:
    """A type expression as written in the source.

    Attributes:
        kind: tree-sitter-go node type (``type_identifier``,
            ``qualified_type``, ``pointer_type``, ``struct_type``, ...).
        text: Source text of the expression.
        line: 1-based line.
        column: 1-based column.
        fields: Field declarations, for ``struct_type`` only.
    """

    kind: str
    text: str
    line: int
    column: int
    fields: tuple[Field, ...] = ()

    @property
    def is_identifier(self) -> bool:
        """True for a bare, unqualified type name such as ``int``."""
        return self.kind == TYPE_IDENTIFIER

    @property
    def is_struct(self) -> bool:
        return self.kind == STRUCT_TYPE

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Field:
    """One field declaration inside a struct.

    A declaration like ``A, B int `json:"a"``` is a single Field with two
    names sharing the type and tag. Embedded fields have no names.

    Attributes:
        names: Declared field names (empty for embedded fields).
        type: Declared type expression.
        tag: Decoded tag string, or None when the field has no tag.
        raw_tag: Tag literal as written in the source.
        line: Line of the declaration.
    """

    names: tuple[str, ...]
    type: TypeExpr
    tag: str | None
    raw_tag: str | None
    line: int

    @property
    def embedded(self) -> bool:
        return not self.names


@dataclass(frozen=True)
class TypeDecl:
    """A type declaration (``type Name ...``).

    Attributes:
        name: Declared type name.
        type: Underlying type expression.
        is_alias: True for ``type Name = Other``.
        type_params: Source text of generic type parameters, if any.
        line: Line of the type name.
        column: Column of the type name.
    """

    name: str
    type: TypeExpr
    is_alias: bool
    type_params: str | None
    line: int
    column: int

    @property
    def is_struct(self) -> bool:
        return not self.is_alias and self.type.is_struct


@dataclass(frozen=True)
class SourceFile:
    """Parsed Go source file.

    Attributes:
        path: Path the source was read from.
        package: Package name from the package clause.
        imports: Imported package paths in source order.
        type_decls: Top-level type declarations in source order, grouped
            declarations flattened.
        comments: All comments in source order.
    """

    path: str
    package: str
    imports: tuple[str, ...] = ()
    type_decls: tuple[TypeDecl, ...] = ()
    comments: tuple[Comment, ...] = field(default=(), repr=False)

    @property
    def directives(self) -> list[str]:
        """Return ``//go:generate`` directive commands in source order."""
        prefix = "//go:generate "
        return [
            comment.text[len(prefix) :].strip()
            for comment in self.comments
            if comment.text.startswith(prefix)
        ]
