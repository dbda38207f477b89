"""Tests for application/classification/classifier.py."""

import logging

import pytest

from declsort.application.classification import Classifier
from declsort.domain.model.annotation import Word
from declsort.domain.model.configuration import SortConfig
from declsort.domain.model.enums import Category, ImportShape, ItemKind, Visibility
from declsort.domain.model.location import Location
from declsort.domain.model.syntax import ItemNode
from tests.factories import (
    DEFAULT_TEST_FILE,
    make_glob,
    make_group,
    make_item,
    make_location,
    make_use_tree,
)


class SameFileSourceMap:
    """Source map where two spans share a source unit iff they share a file."""

    def same_source(self, first: Location, second: Location) -> bool:
        return first.file == second.file


@pytest.fixture
def classifier() -> Classifier:
    return Classifier(SortConfig(), SameFileSourceMap())


def names(declarations: tuple) -> list[str]:
    return [d.name for d in declarations]


class TestDependencies:
    """Tests for extern crate classification."""

    def test_std_dropped(self, classifier: Classifier) -> None:
        result = classifier.classify(
            [make_item(ItemKind.EXTERN_CRATE, "std"), make_item(ItemKind.EXTERN_CRATE, "serde")]
        )
        assert names(result.dependencies) == ["serde"]

    def test_alias_in_name(self, classifier: Classifier) -> None:
        result = classifier.classify([make_item(ItemKind.EXTERN_CRATE, "serde_json", alias="json")])
        assert names(result.dependencies) == ["serde_json as json"]

    def test_custom_std_crate(self) -> None:
        classifier = Classifier(SortConfig(std_crate="core"), SameFileSourceMap())
        result = classifier.classify(
            [make_item(ItemKind.EXTERN_CRATE, "std"), make_item(ItemKind.EXTERN_CRATE, "core")]
        )
        assert names(result.dependencies) == ["std"]


class TestSubModules:
    """Tests for mod classification."""

    def test_out_of_line_kept(self, classifier: Classifier) -> None:
        result = classifier.classify([make_item(ItemKind.MOD, "parser", public=True)])
        assert names(result.sub_modules) == ["parser"]
        assert result.sub_modules[0].visibility is Visibility.PUBLIC

    def test_inline_dropped(self, classifier: Classifier) -> None:
        result = classifier.classify(
            [
                make_item(ItemKind.MOD, "tests", inner_file=DEFAULT_TEST_FILE),
                make_item(ItemKind.MOD, "parser"),
            ]
        )
        assert names(result.sub_modules) == ["parser"]

    def test_inline_skip_logged(
        self, classifier: Classifier, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="declsort")
        classifier.classify([make_item(ItemKind.MOD, "tests", inner_file=DEFAULT_TEST_FILE)])
        assert "skipping inline module tests" in caplog.text

    def test_attributes_carried(self, classifier: Classifier) -> None:
        result = classifier.classify([make_item(ItemKind.MOD, "a", attributes=(Word("macro_use"),))])
        assert result.sub_modules[0].annotations == (Word("macro_use"),)


class TestImports:
    """Tests for use classification."""

    def test_simple_import(self, classifier: Classifier) -> None:
        result = classifier.classify([make_item(ItemKind.USE, use_tree=make_use_tree("a::b"))])
        assert names(result.imports) == ["a::b"]
        assert result.imports[0].shape is ImportShape.SIMPLE

    def test_list_import_carries_flag(self, classifier: Classifier) -> None:
        tree = make_group("foo", "c", "a")
        result = classifier.classify([make_item(ItemKind.USE, use_tree=tree)])
        declaration = result.imports[0]
        assert declaration.name == "foo::{a, c}"
        assert declaration.flagged_internally
        assert [m.name for m in declaration.members] == ["a", "c"]

    @pytest.mark.parametrize("path", ["std::prelude", "std::prelude::v1", "::std::prelude::rust_2021"])
    def test_prelude_glob_dropped(self, classifier: Classifier, path: str) -> None:
        result = classifier.classify([make_item(ItemKind.USE, use_tree=make_glob(path))])
        assert result.imports == ()

    def test_other_glob_kept(self, classifier: Classifier) -> None:
        result = classifier.classify([make_item(ItemKind.USE, use_tree=make_glob("std::io"))])
        assert names(result.imports) == ["std::io::*"]

    def test_prelude_non_glob_kept(self, classifier: Classifier) -> None:
        tree = make_use_tree("std::prelude::v1")
        result = classifier.classify([make_item(ItemKind.USE, use_tree=tree)])
        assert names(result.imports) == ["std::prelude::v1"]


class TestClassification:
    """Tests for the single pass as a whole."""

    def test_other_items_ignored(self, classifier: Classifier) -> None:
        other = ItemNode(kind=ItemKind.OTHER, ident="", span=make_location())
        result = classifier.classify([other])
        assert all(result.of(category) == () for category in Category)

    def test_stable_source_order(self, classifier: Classifier) -> None:
        items = [
            make_item(ItemKind.MOD, "zeta", line=1),
            make_item(ItemKind.USE, line=2, use_tree=make_use_tree("b")),
            make_item(ItemKind.MOD, "alpha", line=3),
            make_item(ItemKind.USE, line=4, use_tree=make_use_tree("a")),
        ]
        result = classifier.classify(items)
        assert names(result.sub_modules) == ["zeta", "alpha"]
        assert names(result.imports) == ["b", "a"]

    def test_of_returns_bucket(self, classifier: Classifier) -> None:
        result = classifier.classify([make_item(ItemKind.EXTERN_CRATE, "log")])
        assert result.of(Category.DEPENDENCY) is result.dependencies

    def test_none_config_raises(self) -> None:
        with pytest.raises(TypeError, match="config must not be None"):
            Classifier(None, SameFileSourceMap())  # type: ignore[arg-type]

    def test_none_source_map_raises(self) -> None:
        with pytest.raises(TypeError, match="source_map must not be None"):
            Classifier(SortConfig(), None)  # type: ignore[arg-type]
