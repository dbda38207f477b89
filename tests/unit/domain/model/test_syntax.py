"""Tests for domain/model/syntax.py."""

from pathlib import Path

import pytest

from declsort.domain.model.enums import ItemKind, UseTreeKind
from declsort.domain.model.syntax import ItemNode, ModuleSyntax, UseTree
from tests.factories import make_glob, make_group, make_location, make_use_tree


class TestUseTree:
    """Tests for UseTree."""

    def test_path_joins_prefix(self) -> None:
        assert make_use_tree("std::io::Read").path == "std::io::Read"

    def test_leading_separator_kept(self) -> None:
        tree = UseTree(kind=UseTreeKind.SIMPLE, prefix=("", "std", "io"))
        assert tree.path == "::std::io"

    def test_simple_without_path_raises(self) -> None:
        with pytest.raises(ValueError, match="simple use tree must have a path"):
            UseTree(kind=UseTreeKind.SIMPLE)

    def test_alias_on_glob_raises(self) -> None:
        with pytest.raises(ValueError, match="only simple use trees can be renamed"):
            UseTree(kind=UseTreeKind.GLOB, prefix=("a",), alias="b")

    def test_children_on_simple_raise(self) -> None:
        with pytest.raises(ValueError, match="only nested use trees have children"):
            UseTree(kind=UseTreeKind.SIMPLE, prefix=("a",), children=(make_glob("b"),))

    def test_group_of_strings(self) -> None:
        tree = make_group("foo", "a", "self")
        assert tree.kind is UseTreeKind.NESTED
        assert [child.path for child in tree.children] == ["a", "self"]


class TestItemNode:
    """Tests for ItemNode FAIL-FIRST validation."""

    def test_mod_without_inner_span_raises(self) -> None:
        with pytest.raises(ValueError, match="MOD item must have inner_span"):
            ItemNode(kind=ItemKind.MOD, ident="a", span=make_location())

    def test_use_without_tree_raises(self) -> None:
        with pytest.raises(ValueError, match="USE item must have use_tree"):
            ItemNode(kind=ItemKind.USE, ident="", span=make_location())

    def test_extern_crate_without_ident_raises(self) -> None:
        with pytest.raises(ValueError, match="EXTERN_CRATE item must have an identifier"):
            ItemNode(kind=ItemKind.EXTERN_CRATE, ident="", span=make_location())

    def test_other_item_needs_no_payload(self) -> None:
        item = ItemNode(kind=ItemKind.OTHER, ident="", span=make_location())
        assert item.use_tree is None
        assert item.inner_span is None


class TestModuleSyntax:
    """Tests for ModuleSyntax."""

    def test_empty_module(self) -> None:
        module = ModuleSyntax(path=Path("lib.rs"), source="")
        assert module.items == ()

    def test_none_source_raises(self) -> None:
        with pytest.raises(TypeError, match="source must not be None"):
            ModuleSyntax(path=Path("lib.rs"), source=None)  # type: ignore[arg-type]
