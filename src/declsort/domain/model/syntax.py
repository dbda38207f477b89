"""Module syntax supplied by the host.

This is the narrow view of a parsed source module that the ordering rule
consumes: the ordered top-level items, each with its identifier,
annotations, visibility, span and kind-specific payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from declsort.domain.model.enums import ItemKind, UseTreeKind, Visibility

if TYPE_CHECKING:
    from pathlib import Path

    from declsort.domain.model.annotation import Annotation
    from declsort.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class UseTree:
    """One node of an import tree.

    Represents:
    - a::b          (SIMPLE, prefix=("a", "b"))
    - a::b as c     (SIMPLE, prefix=("a", "b"), alias="c")
    - a::*          (GLOB, prefix=("a",))
    - a::{b, c}     (NESTED, prefix=("a",), children=(b, c))

    A leading `::` is kept as an empty first segment.

    Attributes:
        kind: Tree node kind
        prefix: Path segments before the glob/group, or the full path
        alias: Rename target (SIMPLE only)
        children: Group members (NESTED only)
    """

    kind: UseTreeKind
    prefix: tuple[str, ...] = ()
    alias: str | None = None
    children: tuple[UseTree, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.kind is UseTreeKind.SIMPLE and not self.prefix:
            raise ValueError("simple use tree must have a path")
        if self.alias is not None and self.kind is not UseTreeKind.SIMPLE:
            raise ValueError("only simple use trees can be renamed")
        if self.alias == "":
            raise ValueError("alias must be non-empty string or None")
        if self.children and self.kind is not UseTreeKind.NESTED:
            raise ValueError("only nested use trees have children")

    @property
    def path(self) -> str:
        """Prefix joined with `::`."""
        return "::".join(self.prefix)


@dataclass(frozen=True, slots=True)
class ItemNode:
    """Top-level item of a module.

    Attributes:
        kind: Item kind
        ident: Identifier (crate name, module name); empty for USE/OTHER
        span: Item source range, outer annotations included
        attributes: Outer annotations in source order
        visibility: Declared visibility
        visibility_marker: Literal marker text when PUBLIC (pub, pub(crate))
        alias: Rename target (EXTERN_CRATE only)
        inner_span: Where the module body is defined (MOD only)
        use_tree: Import tree (USE only)
        body_span: Source range of the import tree (USE only)
    """

    kind: ItemKind
    ident: str
    span: Location
    attributes: tuple[Annotation, ...] = ()
    visibility: Visibility = Visibility.PRIVATE
    visibility_marker: str = "pub"
    alias: str | None = None
    inner_span: Location | None = None
    use_tree: UseTree | None = None
    body_span: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.span is None:
            raise TypeError("span must not be None")
        if self.kind in (ItemKind.EXTERN_CRATE, ItemKind.MOD) and not self.ident:
            raise ValueError(f"{self.kind.name} item must have an identifier")
        if self.kind is ItemKind.MOD and self.inner_span is None:
            raise ValueError("MOD item must have inner_span")
        if self.kind is ItemKind.USE and self.use_tree is None:
            raise ValueError("USE item must have use_tree")
        if not self.visibility_marker:
            raise ValueError("visibility_marker must not be empty")


@dataclass(frozen=True, slots=True)
class ModuleSyntax:
    """Parsed source module.

    Attributes:
        path: Source file path
        source: Full source text (spans index into it)
        items: Top-level items in source order
    """

    path: Path
    source: str
    items: tuple[ItemNode, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if self.source is None:
            raise TypeError("source must not be None")
