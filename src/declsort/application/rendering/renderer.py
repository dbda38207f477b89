"""Declaration renderer: Declaration → RenderedForm.

The rendered form is both the sort key and the literal suggestion text,
so it reproduces valid source: `#[...]` annotation lines, then the
visibility marker, then the body.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from declsort.domain.exceptions.contract import AnnotationContractError
from declsort.domain.model.annotation import ListAnnotation, NameValue, Word
from declsort.domain.model.enums import LiteralKind
from declsort.domain.model.rendered import RenderedForm

if TYPE_CHECKING:
    from collections.abc import Iterable

    from declsort.domain.model.annotation import Annotation
    from declsort.domain.model.declaration import Declaration


def render_annotation(annotation: Annotation) -> str:
    """Flatten one annotation into its inner text (without `#[...]`).

    Raises:
        AnnotationContractError: If a name-value carries a non-string literal
    """
    match annotation:
        case Word(name=name):
            return name
        case ListAnnotation(name=name, children=children):
            inner = ", ".join(render_annotation(child) for child in children)
            return f"{name}({inner})"
        case NameValue(name=name, value=literal):
            if literal.kind is not LiteralKind.STR:
                raise AnnotationContractError(name, literal.kind.name.lower())
            return f'{name} = "{literal.value}"'


class DeclarationRenderer:
    """Renders declarations, memoising per declaration.

    One instance lives for one module check; nothing is shared between
    checks.
    """

    def __init__(self, doc_marker: str = "doc") -> None:
        """Initialize renderer.

        Args:
            doc_marker: Name-value key of documentation annotations,
                which are dropped from rendered forms
        """
        if not doc_marker:
            raise ValueError("doc_marker must not be empty")

        self._doc_marker = doc_marker
        self._cache: dict[Declaration, RenderedForm] = {}

    def render(self, declaration: Declaration) -> RenderedForm:
        """Render declaration (cached).

        Raises:
            AnnotationContractError: If an annotation violates the contract
        """
        cached = self._cache.get(declaration)
        if cached is not None:
            return cached

        rendered = self._render(declaration)
        self._cache[declaration] = rendered
        return rendered

    def render_annotations(self, annotations: Iterable[Annotation]) -> str:
        """Render annotation lines, documentation dropped, newline-joined."""
        return "\n".join(
            f"#[{render_annotation(annotation)}]"
            for annotation in annotations
            if not self._is_documentation(annotation)
        )

    def _render(self, declaration: Declaration) -> RenderedForm:
        block = self.render_annotations(declaration.annotations)
        public = declaration.is_public and declaration.category.carries_visibility

        if public:
            marker = f"{declaration.visibility_marker} "
            # marker on its own line after the annotations
            prefix = f"{block}\n{marker}" if block else marker
        else:
            prefix = f"{block}\n" if block else ""

        return RenderedForm(prefix=prefix, name=declaration.name, public=public)

    def _is_documentation(self, annotation: Annotation) -> bool:
        return isinstance(annotation, NameValue) and annotation.name == self._doc_marker
