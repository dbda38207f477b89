"""Decorative annotation value objects.

Annotations form a recursive sum type:
- Word: `#[test]`
- ListAnnotation: `#[cfg(feature = "x", test)]`
- NameValue: `#[path = "foo.rs"]`
"""

from __future__ import annotations

from dataclasses import dataclass

from declsort.domain.model.enums import LiteralKind


@dataclass(frozen=True, slots=True)
class Literal:
    """Literal value of a name-value annotation.

    Attributes:
        kind: Literal kind
        value: Literal text; for strings the escaped contents between quotes
    """

    kind: LiteralKind
    value: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.kind, LiteralKind):
            raise TypeError(f"kind must be LiteralKind, got {type(self.kind).__name__}")


@dataclass(frozen=True, slots=True)
class Word:
    """Bare annotation name."""

    name: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("annotation name must not be empty")


@dataclass(frozen=True, slots=True)
class ListAnnotation:
    """Annotation with nested children: `name(child, child)`."""

    name: str
    children: tuple[Annotation, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("annotation name must not be empty")


@dataclass(frozen=True, slots=True)
class NameValue:
    """Annotation binding a name to a literal: `name = "value"`."""

    name: str
    value: Literal

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("annotation name must not be empty")
        if self.value is None:
            raise TypeError("value must not be None")


Annotation = Word | ListAnnotation | NameValue
