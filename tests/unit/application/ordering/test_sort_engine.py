"""Tests for application/ordering/sort_engine.py."""

from declsort.application.ordering import canonical_order, ordering_key
from declsort.application.rendering import DeclarationRenderer
from declsort.domain.model.annotation import ListAnnotation, Word
from declsort.domain.model.enums import Category
from tests.factories import make_declaration


def names(declarations: tuple) -> list[str]:
    return [d.name for d in declarations]


class TestOrderingKey:
    """Tests for the two-key comparator."""

    def test_private_key(self) -> None:
        key = ordering_key(make_declaration("a"), DeclarationRenderer())
        assert key == (False, "a")

    def test_public_key(self) -> None:
        key = ordering_key(make_declaration("a", public=True), DeclarationRenderer())
        assert key == (True, "a")

    def test_equal_names_share_a_key(self) -> None:
        renderer = DeclarationRenderer()
        first, second = make_declaration("a"), make_declaration("a", line=2)
        assert ordering_key(first, renderer) == ordering_key(second, renderer)

    def test_private_before_public_regardless_of_name(self) -> None:
        renderer = DeclarationRenderer()
        private = ordering_key(make_declaration("z"), renderer)
        public = ordering_key(make_declaration("a", public=True), renderer)
        assert private < public


class TestCanonicalOrder:
    """Tests for canonical_order."""

    def test_alphabetical(self) -> None:
        declarations = [make_declaration(n, line=i + 1) for i, n in enumerate(["c", "a", "b"])]
        assert names(canonical_order(declarations, DeclarationRenderer())) == ["a", "b", "c"]

    def test_ordinal_not_case_folded(self) -> None:
        declarations = [make_declaration(n) for n in ["b", "B", "a"]]
        assert names(canonical_order(declarations, DeclarationRenderer())) == ["B", "a", "b"]

    def test_public_after_private(self) -> None:
        declarations = [make_declaration("b", public=True), make_declaration("c"), make_declaration("a")]
        ordered = canonical_order(declarations, DeclarationRenderer())
        assert names(ordered) == ["a", "c", "b"]
        assert ordered[-1].is_public

    def test_dependency_visibility_ignored(self) -> None:
        declarations = [
            make_declaration("b", Category.DEPENDENCY, public=True),
            make_declaration("a", Category.DEPENDENCY),
        ]
        assert names(canonical_order(declarations, DeclarationRenderer())) == ["a", "b"]

    def test_annotations_do_not_affect_order(self) -> None:
        declarations = [
            make_declaration("b", annotations=(Word("macro_use"),)),
            make_declaration("a", annotations=(ListAnnotation("cfg", (Word("test"),)),)),
        ]
        assert names(canonical_order(declarations, DeclarationRenderer())) == ["a", "b"]

    def test_stable_for_equal_keys(self) -> None:
        first = make_declaration("a", line=1)
        second = make_declaration("a", line=2)
        ordered = canonical_order([second, first], DeclarationRenderer())
        assert ordered == (second, first)

    def test_input_not_modified(self) -> None:
        declarations = [make_declaration("b"), make_declaration("a")]
        snapshot = list(declarations)
        canonical_order(declarations, DeclarationRenderer())
        assert declarations == snapshot

    def test_empty(self) -> None:
        assert canonical_order([], DeclarationRenderer()) == ()
