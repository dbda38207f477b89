"""Comparator & sort engine.

Canonical order within a category: every private declaration before
every public one, then ordinal comparison of the rendered name. Equal
keys keep their original relative order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from declsort.application.rendering.renderer import DeclarationRenderer
    from declsort.domain.model.declaration import Declaration


def ordering_key(declaration: Declaration, renderer: DeclarationRenderer) -> tuple[bool, str]:
    """Two-key comparator: (publicly rendered, rendered name)."""
    return renderer.render(declaration).sort_key


def canonical_order(
    declarations: Sequence[Declaration],
    renderer: DeclarationRenderer,
) -> tuple[Declaration, ...]:
    """Return declarations in canonical order.

    The input sequence is not modified. sorted() is stable, so ties keep
    source order.
    """
    return tuple(sorted(declarations, key=lambda d: ordering_key(d, renderer)))
