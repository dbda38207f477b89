"""Divergence detector & suggestion builder.

Compares a category's original sequence with its canonical sequence and
turns the first mismatch into one diagnostic covering the rest of the
run, with the canonical declarations as a ready-to-paste block.

The suggestion is rendered from the declarations. Fix edits copy each
declaration's own source text instead, so doc comments and visibility
markers survive; only an unsorted brace list is rewritten.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from declsort.domain.model.diagnostic import Diagnostic, TextEdit

if TYPE_CHECKING:
    from collections.abc import Sequence

    from declsort.application.rendering.renderer import DeclarationRenderer
    from declsort.domain.model.declaration import Declaration
    from declsort.domain.model.enums import Category

RULE_NAME = "unsorted_declarations"


def find_divergence(
    original: Sequence[Declaration],
    canonical: Sequence[Declaration],
) -> int | None:
    """Index of the first mismatch, None if the sequences agree.

    An internally unsorted brace list is a mismatch even in place.

    Raises:
        ValueError: If the sequences differ in length
    """
    if len(original) != len(canonical):
        raise ValueError(
            f"sequences differ in length: {len(original)} original, {len(canonical)} canonical"
        )

    for index, (before, after) in enumerate(zip(original, canonical, strict=True)):
        if before.name != after.name or before.flagged_internally:
            return index
    return None


def header(category: Category) -> str:
    """Diagnostic header naming the category."""
    return f"{category.description} should be in alphabetical order!\nTry this..."


class SuggestionBuilder:
    """Builds the diagnostic for a diverging category."""

    def __init__(self, renderer: DeclarationRenderer, source: str | None = None) -> None:
        """Initialize builder.

        Args:
            renderer: Renders the suggestion lines
            source: Module text the spans index into (edits fall back to
                rendered lines if None)
        """
        self._renderer = renderer
        self._source = source

    def build(
        self,
        original: Sequence[Declaration],
        canonical: Sequence[Declaration],
        divergence: int,
        category: Category,
    ) -> Diagnostic:
        """Build the diagnostic from `divergence` to the end of the run.

        Args:
            original: Declarations in source order
            canonical: Same declarations in canonical order
            divergence: First mismatching index
            category: Checked category

        Returns:
            Diagnostic whose location spans original[divergence:]
        """
        if not 0 <= divergence < len(original):
            raise ValueError(f"divergence {divergence} out of range for {len(original)} declarations")

        location = original[divergence].span.extend_to(original[-1].span)
        moved = canonical[divergence:]
        suggestion = "\n".join(
            self._renderer.render(declaration).line(category.keyword) for declaration in moved
        )
        replacements = tuple(
            TextEdit(location=before.span, text=self._edit_text(after, category))
            for before, after in zip(original[divergence:], moved, strict=True)
        )

        return Diagnostic(
            rule_name=RULE_NAME,
            category=category,
            location=location,
            message=f"{header(category)}\n\n{suggestion}",
            suggestion=suggestion,
            replacements=replacements,
        )

    def _edit_text(self, declaration: Declaration, category: Category) -> str:
        if self._source is None:
            return self._renderer.render(declaration).line(category.keyword)

        span = declaration.span
        body = declaration.body_span
        if not declaration.flagged_internally or body is None:
            return self._source[span.offset : span.end_offset]
        return (
            self._source[span.offset : body.offset]
            + declaration.name
            + self._source[body.end_offset : span.end_offset]
        )


def check(
    original: Sequence[Declaration],
    canonical: Sequence[Declaration],
    category: Category,
    renderer: DeclarationRenderer,
    source: str | None = None,
) -> Diagnostic | None:
    """Diagnostic for one category, None if already in canonical order."""
    divergence = find_divergence(original, canonical)
    if divergence is None:
        return None
    return SuggestionBuilder(renderer, source).build(original, canonical, divergence, category)
