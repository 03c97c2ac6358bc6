"""Go source parsing on the tree-sitter Go grammar.

tree-sitter builds the concrete syntax tree. This module rejects trees with
syntax errors, enforces Go's file-level rules (package clause first, only
declarations at top level) and maps the declarations the generator reads
onto :mod:`structschema.source.nodes`.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

import structlog
import tree_sitter_go
from tree_sitter import Language, Node, Parser

from structschema.errors import ParseError
from structschema.source.nodes import (
    STRUCT_TYPE,
    Comment,
    Field,
    SourceFile,
    TypeDecl,
    TypeExpr,
)

logger = structlog.get_logger(__name__)

GO_LANGUAGE = Language(tree_sitter_go.language())

# Top-level declarations that carry nothing the generator reads
_SKIPPED_DECLARATIONS = frozenset(
    {"function_declaration", "method_declaration", "const_declaration", "var_declaration"}
)

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
}
_ESCAPE_RE = re.compile(
    r"\\(?:x([0-9a-fA-F]{2})|u([0-9a-fA-F]{4})|U([0-9a-fA-F]{8})|([0-7]{3})|(.))",
    re.DOTALL,
)

_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


@lru_cache(maxsize=1)
def get_parser() -> Parser:
    """Return the shared tree-sitter parser for Go."""
    return Parser(GO_LANGUAGE)


def _decode_escape(match: re.Match[str]) -> bytes:
    hex_byte, short_unicode, long_unicode, octal, simple = match.groups()
    if hex_byte:
        return bytes([int(hex_byte, 16)])
    if octal:
        value = int(octal, 8)
        if value > 0xFF:
            raise ValueError(f"octal escape value {value} > 255")
        return bytes([value])
    if short_unicode or long_unicode:
        code_point = int(short_unicode or long_unicode, 16)
        if code_point in _SURROGATES or code_point > _MAX_CODE_POINT:
            raise ValueError("escape sequence is invalid Unicode code point")
        return chr(code_point).encode("utf-8")
    if simple in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[simple].encode("utf-8")
    raise ValueError(f"unknown escape sequence \\{simple}")


def unquote(literal: str) -> str:
    """Decode a Go string literal to its value.

    Raw literals lose their backticks (carriage returns are dropped, as
    in Go). Interpreted literals have their escape sequences decoded with
    Go's rules: ``\\xNN`` and octal escapes are single bytes, ``\\u`` and
    ``\\U`` escapes are code points.

    Args:
        literal: String literal as written in the source.

    Returns:
        The decoded string value.

    Raises:
        ValueError: If an interpreted literal has an unknown or invalid
            escape, or its bytes are not valid UTF-8.

    Example:
        >>> unquote('`json:"id"`')
        'json:"id"'
        >>> unquote('"json:\\\\"id\\\\""')
        'json:"id"'
    """
    if literal.startswith("`"):
        return literal[1:-1].replace("\r", "")

    body = literal[1:-1]
    value = bytearray()
    pos = 0
    for match in _ESCAPE_RE.finditer(body):
        value += body[pos : match.start()].encode("utf-8")
        value += _decode_escape(match)
        pos = match.end()
    value += body[pos:].encode("utf-8")

    try:
        return value.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValueError("string literal is not valid UTF-8") from e


def _first_error(node: Node) -> Node | None:
    """Return the first ERROR or MISSING node in document order."""
    for child in node.children:
        if child.is_error or child.is_missing:
            return child
        if child.has_error:
            found = _first_error(child)
            if found is not None:
                return found
    return None


class DeclarationReader:
    """Map a tree-sitter Go syntax tree onto the declaration model.

    Example:
        >>> source = b"package m\\ntype T struct{ A int }\\n"
        >>> tree = get_parser().parse(source)
        >>> DeclarationReader(source, "m.go").read(tree.root_node).type_decls[0].name
        'T'
    """

    def __init__(self, source: bytes, file_path: str = "<source>") -> None:
        self.source = source
        self.file_path = file_path

    def text(self, node: Node) -> str:
        return self.source[node.start_byte : node.end_byte].decode("utf-8")

    def position(self, node: Node) -> tuple[int, int]:
        """Return the 1-based line and character column of a node."""
        row, byte_column = node.start_point
        line_start = node.start_byte - byte_column
        prefix = self.source[line_start : node.start_byte].decode("utf-8", errors="replace")
        return row + 1, len(prefix) + 1

    def error(self, problem: str, node: Node) -> ParseError:
        line, column = self.position(node)
        return ParseError(self.file_path, problem, line=line, column=column)

    def _first_token(self, node: Node) -> str:
        while node.children:
            node = node.children[0]
        return f"'{self.text(node)}'"

    def _decode_string(self, node: Node) -> str:
        try:
            return unquote(self.text(node))
        except ValueError as e:
            raise self.error(str(e), node) from e

    # -- file level ----------------------------------------------------

    def read(self, root: Node) -> SourceFile:
        """Read the whole file.

        Returns:
            The parsed SourceFile.

        Raises:
            ParseError: If the tree has syntax errors or breaks Go's
                file-level rules.
        """
        if root.has_error:
            raise self._syntax_error(root)

        package: str | None = None
        imports: list[str] = []
        type_decls: list[TypeDecl] = []

        for node in root.named_children:
            kind = node.type
            if kind == "comment":
                continue
            if package is None:
                if kind != "package_clause":
                    raise self.error(f"expected 'package', found {self._first_token(node)}", node)
                package = self.text(node.named_children[0])
            elif kind == "import_declaration":
                imports.extend(self._read_imports(node))
            elif kind == "type_declaration":
                type_decls.extend(self._read_type_declaration(node))
            elif kind not in _SKIPPED_DECLARATIONS:
                raise self.error(
                    f"non-declaration statement outside function body: {self._first_token(node)}",
                    node,
                )

        if package is None:
            raise ParseError(
                self.file_path,
                "expected 'package', found 'EOF'",
                line=root.end_point[0] + 1,
            )

        return SourceFile(
            path=self.file_path,
            package=package,
            imports=tuple(imports),
            type_decls=tuple(type_decls),
            comments=tuple(self._read_comments(root)),
        )

    def _syntax_error(self, root: Node) -> ParseError:
        node = _first_error(root) or root
        if node.is_missing:
            return self.error(f"missing '{node.type}'", node)
        snippet = self.text(node).strip().split("\n", 1)[0][:40]
        if not snippet:
            return self.error("syntax error", node)
        return self.error(f"syntax error near {snippet!r}", node)

    def _read_comments(self, root: Node) -> list[Comment]:
        comments: list[Comment] = []
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "comment":
                line, column = self.position(node)
                comments.append(Comment(self.text(node), line, column))
            else:
                stack.extend(reversed(node.children))
        return comments

    def _read_imports(self, node: Node) -> list[str]:
        specs: list[Node] = []
        for child in node.named_children:
            if child.type == "import_spec":
                specs.append(child)
            elif child.type == "import_spec_list":
                specs.extend(spec for spec in child.named_children if spec.type == "import_spec")
        return [self._decode_string(spec.child_by_field_name("path")) for spec in specs]

    # -- declarations --------------------------------------------------

    def _read_type_declaration(self, node: Node) -> list[TypeDecl]:
        # Grouped specs are direct children of the declaration too
        return [
            self._read_type_spec(spec)
            for spec in node.named_children
            if spec.type in ("type_spec", "type_alias")
        ]

    def _read_type_spec(self, spec: Node) -> TypeDecl:
        name = spec.child_by_field_name("name")
        params = spec.child_by_field_name("type_parameters")
        line, column = self.position(name)
        return TypeDecl(
            name=self.text(name),
            type=self._read_type(spec.child_by_field_name("type")),
            is_alias=spec.type == "type_alias",
            type_params=self.text(params)[1:-1].strip() if params is not None else None,
            line=line,
            column=column,
        )

    def _read_type(self, node: Node) -> TypeExpr:
        line, column = self.position(node)
        fields: tuple[Field, ...] = ()
        if node.type == STRUCT_TYPE:
            fields = self._read_fields(node)
        return TypeExpr(
            kind=node.type,
            text=self.text(node),
            line=line,
            column=column,
            fields=fields,
        )

    def _read_fields(self, struct_node: Node) -> tuple[Field, ...]:
        fields: list[Field] = []
        for body in struct_node.named_children:
            if body.type != "field_declaration_list":
                continue
            fields.extend(
                self._read_field(decl)
                for decl in body.named_children
                if decl.type == "field_declaration"
            )
        return tuple(fields)

    def _read_field(self, node: Node) -> Field:
        names = tuple(self.text(name) for name in node.children_by_field_name("name"))
        type_expr = self._read_type(node.child_by_field_name("type"))
        line, column = self.position(node)

        # The grammar keeps the '*' of an embedded pointer outside the type node
        if not names and node.children[0].type == "*":
            type_expr = TypeExpr(
                kind="pointer_type",
                text=f"*{type_expr.text}",
                line=line,
                column=column,
            )

        tag = raw_tag = None
        tag_node = node.child_by_field_name("tag")
        if tag_node is not None:
            raw_tag = self.text(tag_node)
            tag = self._decode_string(tag_node)

        return Field(names=names, type=type_expr, tag=tag, raw_tag=raw_tag, line=line)


def parse_source(text: str, file_path: str = "<source>") -> SourceFile:
    """Parse Go source text.

    Args:
        text: Go source text.
        file_path: Path used in error messages and recorded on the result.

    Returns:
        Parsed SourceFile.

    Raises:
        ParseError: If the text is not syntactically valid.
    """
    source = text.encode("utf-8")
    tree = get_parser().parse(source)
    result = DeclarationReader(source, file_path).read(tree.root_node)

    logger.debug(
        "source_parsed",
        file_path=file_path,
        package=result.package,
        type_decls=len(result.type_decls),
        comments=len(result.comments),
    )
    return result


def parse_file(path: Path | str) -> SourceFile:
    """Read and parse a Go source file.

    Args:
        path: Path to the .go file.

    Returns:
        Parsed SourceFile, with comments retained.

    Raises:
        ParseError: If the file cannot be read or decoded, or is not
            syntactically valid.

    Example:
        >>> source = parse_file("user.go")
        >>> [decl.name for decl in source.type_decls]
        ['User']
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ParseError(str(path), "no such file") from None
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(str(path), "cannot read file", internal_details=repr(e)) from e
    return parse_source(text, str(path))
