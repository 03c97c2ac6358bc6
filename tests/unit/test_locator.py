"""Unit tests for struct type lookup."""

from __future__ import annotations

from pathlib import Path

import pytest

from structschema.errors import NotFoundError
from structschema.locator import find_struct, iter_type_decls, struct_names
from structschema.source import parse_file, parse_source


class TestFindStruct:
    """Tests for find_struct."""

    def test_finds_struct(self, user_go: Path) -> None:
        """The named struct declaration is returned."""
        decl = find_struct(parse_file(user_go), "User")
        assert decl.name == "User"
        assert decl.is_struct
        assert decl.line == 5

    def test_skips_alias_with_same_name(self, account_go: Path) -> None:
        """A non-struct declaration with the name does not stop the search."""
        source = parse_file(account_go)
        decl = find_struct(source, "Account")
        assert decl.is_struct
        assert decl is source.type_decls[2]

    def test_first_struct_wins(self) -> None:
        """With duplicate struct declarations the first one is used."""
        source = parse_source(
            'package p\ntype T struct { A int `json:"first"` }\n'
            'type T struct { B int `json:"second"` }\n'
        )
        decl = find_struct(source, "T")
        assert decl.type.fields[0].names == ("A",)

    def test_name_is_case_sensitive(self, user_go: Path) -> None:
        """Lookup compares names exactly."""
        with pytest.raises(NotFoundError):
            find_struct(parse_file(user_go), "user")

    def test_interface_is_not_found(self, account_go: Path) -> None:
        """An interface type counts as not found."""
        with pytest.raises(NotFoundError) as exc_info:
            find_struct(parse_file(account_go), "Store")
        assert exc_info.value.type_name == "Store"

    def test_named_basic_type_is_not_found(self, account_go: Path) -> None:
        """'type Status int' is not a struct."""
        with pytest.raises(NotFoundError):
            find_struct(parse_file(account_go), "Status")

    def test_not_found_names_type_file_and_candidates(self, account_go: Path) -> None:
        """The error names the type, the file and the structs available."""
        with pytest.raises(NotFoundError) as exc_info:
            find_struct(parse_file(account_go), "Invoice")
        error = exc_info.value
        assert error.file_path == str(account_go)
        assert error.available == ["Account", "Owner", "Page"]
        assert str(error).startswith(f"Type Invoice not found in {account_go}")


class TestTraversal:
    """Tests for declaration traversal helpers."""

    def test_iter_type_decls_in_order(self, account_go: Path) -> None:
        """Declarations are yielded in source order."""
        names = [decl.name for decl in iter_type_decls(parse_file(account_go))]
        assert names == ["Account", "Status", "Account", "Owner", "Store", "Page"]

    def test_struct_names(self, account_go: Path) -> None:
        """Only struct declarations are listed."""
        assert struct_names(parse_file(account_go)) == ["Account", "Owner", "Page"]
