"""Tests for application/rendering/renderer.py."""

import pytest

from declsort.application.rendering import DeclarationRenderer, render_annotation
from declsort.domain.exceptions import AnnotationContractError
from declsort.domain.model.annotation import ListAnnotation, Literal, NameValue, Word
from declsort.domain.model.declaration import Declaration
from declsort.domain.model.enums import Category, LiteralKind, Visibility
from tests.factories import make_declaration, make_location

CFG_TEST = ListAnnotation("cfg", (Word("test"),))
DOC = NameValue("doc", Literal(LiteralKind.STR, " Parser module."))


class TestRenderAnnotation:
    """Tests for the recursive annotation fold."""

    def test_word(self) -> None:
        assert render_annotation(Word("test")) == "test"

    def test_list(self) -> None:
        assert render_annotation(CFG_TEST) == "cfg(test)"

    def test_empty_list(self) -> None:
        assert render_annotation(ListAnnotation("derive")) == "derive()"

    def test_name_value(self) -> None:
        annotation = NameValue("path", Literal(LiteralKind.STR, "foo.rs"))
        assert render_annotation(annotation) == 'path = "foo.rs"'

    def test_nested(self) -> None:
        annotation = ListAnnotation(
            "cfg",
            (
                ListAnnotation(
                    "all",
                    (Word("unix"), NameValue("feature", Literal(LiteralKind.STR, "serde"))),
                ),
            ),
        )
        assert render_annotation(annotation) == 'cfg(all(unix, feature = "serde"))'

    @pytest.mark.parametrize(
        ("kind", "value"),
        [
            (LiteralKind.INT, "1"),
            (LiteralKind.BOOL, "true"),
            (LiteralKind.BYTE_STR, "abc"),
            (LiteralKind.FLOAT, "1.5"),
            (LiteralKind.CHAR, "c"),
        ],
    )
    def test_non_string_literal_raises(self, kind: LiteralKind, value: str) -> None:
        annotation = NameValue("path", Literal(kind, value))
        with pytest.raises(AnnotationContractError, match=f"unexpected {kind.name.lower()} literal"):
            render_annotation(annotation)

    def test_non_string_literal_inside_list_raises(self) -> None:
        annotation = ListAnnotation("cfg", (NameValue("level", Literal(LiteralKind.INT, "3")),))
        with pytest.raises(AnnotationContractError, match="annotation 'level'"):
            render_annotation(annotation)


class TestDeclarationRenderer:
    """Tests for DeclarationRenderer."""

    def test_plain_private(self) -> None:
        rendered = DeclarationRenderer().render(make_declaration("parser"))
        assert rendered.prefix == ""
        assert rendered.name == "parser"
        assert not rendered.public
        assert rendered.line("mod") == "mod parser;"

    def test_plain_public(self) -> None:
        rendered = DeclarationRenderer().render(make_declaration("parser", public=True))
        assert rendered.prefix == "pub "
        assert rendered.public
        assert rendered.line("mod") == "pub mod parser;"

    def test_annotations_each_on_own_line(self) -> None:
        declaration = make_declaration(
            "tests", annotations=(CFG_TEST, Word("allow_internal_unstable"))
        )
        rendered = DeclarationRenderer().render(declaration)
        assert rendered.line("mod") == "#[cfg(test)]\n#[allow_internal_unstable]\nmod tests;"

    def test_public_marker_after_annotation_block(self) -> None:
        declaration = make_declaration("tests", public=True, annotations=(CFG_TEST,))
        rendered = DeclarationRenderer().render(declaration)
        assert rendered.prefix == "#[cfg(test)]\npub "
        assert rendered.line("mod") == "#[cfg(test)]\npub mod tests;"

    def test_documentation_dropped(self) -> None:
        declaration = make_declaration("parser", annotations=(DOC, CFG_TEST))
        rendered = DeclarationRenderer().render(declaration)
        assert rendered.prefix == "#[cfg(test)]\n"

    def test_only_documentation_gives_empty_prefix(self) -> None:
        rendered = DeclarationRenderer().render(make_declaration("parser", annotations=(DOC,)))
        assert rendered.prefix == ""

    def test_custom_doc_marker(self) -> None:
        note = NameValue("note", Literal(LiteralKind.STR, "x"))
        declaration = make_declaration("parser", annotations=(note, DOC))
        rendered = DeclarationRenderer(doc_marker="note").render(declaration)
        assert rendered.prefix == '#[doc = " Parser module."]\n'

    def test_dependency_never_public(self) -> None:
        declaration = make_declaration("serde", Category.DEPENDENCY, public=True)
        rendered = DeclarationRenderer().render(declaration)
        assert not rendered.public
        assert rendered.line("extern crate") == "extern crate serde;"

    def test_restricted_visibility_marker_kept(self) -> None:
        declaration = Declaration(
            name="parser",
            category=Category.SUB_MODULE,
            visibility=Visibility.PUBLIC,
            span=make_location(),
            visibility_marker="pub(crate)",
        )
        rendered = DeclarationRenderer().render(declaration)
        assert rendered.line("mod") == "pub(crate) mod parser;"

    def test_render_is_memoised(self) -> None:
        renderer = DeclarationRenderer()
        declaration = make_declaration("parser")
        assert renderer.render(declaration) is renderer.render(declaration)

    def test_contract_violation_propagates(self) -> None:
        declaration = make_declaration(
            "parser", annotations=(NameValue("path", Literal(LiteralKind.INT, "7")),)
        )
        with pytest.raises(AnnotationContractError):
            DeclarationRenderer().render(declaration)

    def test_empty_doc_marker_raises(self) -> None:
        with pytest.raises(ValueError, match="doc_marker must not be empty"):
            DeclarationRenderer(doc_marker="")
