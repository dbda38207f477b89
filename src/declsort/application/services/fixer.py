"""Fixer: applies diagnostic replacements to source text."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from declsort.domain.model.diagnostic import Diagnostic, TextEdit


def apply_fixes(source: str, diagnostics: Iterable[Diagnostic]) -> str:
    """Rewrite source so every diagnostic's suggestion is in place.

    Each diagnostic replaces its declarations slot by slot, so items and
    comments between the declarations stay where they are.

    Args:
        source: Original module text (the one the spans point into)
        diagnostics: Diagnostics produced for that text

    Returns:
        Rewritten text

    Raises:
        ValueError: If edits overlap or fall outside the text
    """
    edits = sorted(
        (edit for diagnostic in diagnostics for edit in diagnostic.replacements),
        key=lambda edit: edit.location.offset,
    )
    _validate(source, edits)

    parts: list[str] = []
    cursor = 0
    for edit in edits:
        parts.append(source[cursor : edit.location.offset])
        parts.append(edit.text)
        cursor = edit.location.end_offset
    parts.append(source[cursor:])
    return "".join(parts)


def _validate(source: str, edits: list[TextEdit]) -> None:
    """FAIL-FIRST: edits must be disjoint and inside the text."""
    previous_end = 0
    for edit in edits:
        if edit.location.end_offset > len(source):
            raise ValueError(f"edit at {edit.location} ends past the end of the source")
        if edit.location.offset < previous_end:
            raise ValueError(f"edit at {edit.location} overlaps a previous edit")
        previous_end = edit.location.end_offset
