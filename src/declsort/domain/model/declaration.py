"""Classified declaration entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from declsort.domain.model.enums import Category, ImportShape, Visibility

if TYPE_CHECKING:
    from declsort.domain.model.annotation import Annotation
    from declsort.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class ImportMember:
    """Member of a braced import list.

    `self` stands for the enclosing module: `use a::{self, b}`.

    Attributes:
        name: Member path (may itself contain `::` or a nested group)
        alias: Rename target
    """

    name: str
    alias: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("member name must not be empty")
        if self.alias == "":
            raise ValueError("alias must be non-empty string or None")

    @property
    def is_self(self) -> bool:
        """Whether this member refers to the enclosing module."""
        return self.name == "self"

    @property
    def text(self) -> str:
        """Member as written in a rendered list."""
        if self.alias is None:
            return self.name
        return f"{self.name} as {self.alias}"


@dataclass(frozen=True, slots=True)
class Declaration:
    """One classified top-level declaration.

    Immutable; created per check and discarded afterward.

    Attributes:
        name: Rendered body (crate name, module name, normalized import path)
        category: Declaration category
        visibility: Declared visibility
        span: Source range of the declaration
        annotations: Outer annotations in source order
        visibility_marker: Literal marker text used when PUBLIC
        shape: Import shape (IMPORT only)
        members: List members in canonical order (LIST imports only)
        flagged_internally: Brace list members were out of order
        body_span: Source range of the import path (IMPORT only)
    """

    name: str
    category: Category
    visibility: Visibility
    span: Location
    annotations: tuple[Annotation, ...] = ()
    visibility_marker: str = "pub"
    shape: ImportShape | None = None
    members: tuple[ImportMember, ...] = ()
    flagged_internally: bool = False
    body_span: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("declaration name must not be empty")
        if self.span is None:
            raise TypeError("span must not be None")
        if (self.shape is None) != (self.category is not Category.IMPORT):
            raise ValueError("shape must be set exactly for IMPORT declarations")
        if self.members and self.shape is not ImportShape.LIST:
            raise ValueError("only LIST imports have members")
        if not isinstance(self.flagged_internally, bool):
            raise TypeError("flagged_internally must be bool")
        if self.flagged_internally and self.shape is not ImportShape.LIST:
            raise ValueError("only LIST imports can be flagged internally")

    @property
    def is_public(self) -> bool:
        """Whether the declaration is declared public."""
        return self.visibility is Visibility.PUBLIC
