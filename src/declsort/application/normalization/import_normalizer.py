"""Import normalizer: UseTree → NormalizedImport.

Expands the three import shapes into their canonical text:
- simple:   a::b, or a::b as c when the alias is not redundant
- list:     a::{self, b, c} with members reordered self-first
- wildcard: a::*
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from declsort.domain.model.declaration import ImportMember
from declsort.domain.model.enums import ImportShape, UseTreeKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from declsort.domain.model.syntax import UseTree


@dataclass(frozen=True, slots=True)
class NormalizedImport:
    """Normalized import declaration.

    Attributes:
        text: Rendered body, members in canonical order
        shape: Import shape
        members: Canonically ordered members (LIST only)
        flagged_internally: Some brace list (at any depth) was out of order
    """

    text: str
    shape: ImportShape
    members: tuple[ImportMember, ...] = ()
    flagged_internally: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.text:
            raise ValueError("text must not be empty")


def member_order_key(member: ImportMember) -> tuple[bool, str]:
    """`self` first, then ordinal comparison of the member text."""
    return (not member.is_self, member.text)


def canonical_members(members: Iterable[ImportMember]) -> tuple[ImportMember, ...]:
    """Sort list members into canonical order."""
    return tuple(sorted(members, key=member_order_key))


def normalize(tree: UseTree) -> NormalizedImport:
    """Normalize a top-level import tree."""
    match tree.kind:
        case UseTreeKind.SIMPLE:
            alias = _effective_alias(tree)
            if alias is None:
                return NormalizedImport(text=tree.path, shape=ImportShape.SIMPLE)
            return NormalizedImport(text=f"{tree.path} as {alias}", shape=ImportShape.RENAMED)

        case UseTreeKind.GLOB:
            return NormalizedImport(text=_join(tree.prefix, "*"), shape=ImportShape.WILDCARD)

        case UseTreeKind.NESTED:
            members, nested_flag = _members(tree.children)
            ordered = canonical_members(members)
            body = "{" + ", ".join(member.text for member in ordered) + "}"
            return NormalizedImport(
                text=_join(tree.prefix, body),
                shape=ImportShape.LIST,
                members=ordered,
                flagged_internally=nested_flag or ordered != members,
            )


def _members(children: tuple[UseTree, ...]) -> tuple[tuple[ImportMember, ...], bool]:
    """Convert group children to members, in source order."""
    members: list[ImportMember] = []
    flagged = False

    for child in children:
        match child.kind:
            case UseTreeKind.SIMPLE:
                members.append(ImportMember(name=child.path, alias=_effective_alias(child)))
            case UseTreeKind.GLOB:
                members.append(ImportMember(name=_join(child.prefix, "*")))
            case UseTreeKind.NESTED:
                nested = normalize(child)
                flagged = flagged or nested.flagged_internally
                members.append(ImportMember(name=nested.text))

    return tuple(members), flagged


def _effective_alias(tree: UseTree) -> str | None:
    """Alias, unless it only repeats the trailing path segment."""
    if tree.alias is None or tree.alias == tree.prefix[-1]:
        return None
    return tree.alias


def _join(prefix: tuple[str, ...], tail: str) -> str:
    if not prefix:
        return tail
    return "::".join(prefix) + "::" + tail
