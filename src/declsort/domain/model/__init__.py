"""Domain model entities."""

from declsort.domain.model.annotation import (
    Annotation,
    ListAnnotation,
    Literal,
    NameValue,
    Word,
)
from declsort.domain.model.check_result import CheckResult
from declsort.domain.model.configuration import SortConfig
from declsort.domain.model.declaration import Declaration, ImportMember
from declsort.domain.model.diagnostic import Diagnostic, TextEdit
from declsort.domain.model.enums import (
    Category,
    ImportShape,
    ItemKind,
    LiteralKind,
    Severity,
    UseTreeKind,
    Visibility,
)
from declsort.domain.model.location import Location
from declsort.domain.model.rendered import RenderedForm
from declsort.domain.model.syntax import ItemNode, ModuleSyntax, UseTree

__all__ = [
    # Enums
    "Category",
    "ImportShape",
    "ItemKind",
    "LiteralKind",
    "Severity",
    "UseTreeKind",
    "Visibility",
    # Value objects
    "Location",
    "Literal",
    "Word",
    "ListAnnotation",
    "NameValue",
    "Annotation",
    "ImportMember",
    "RenderedForm",
    "TextEdit",
    # Host syntax
    "UseTree",
    "ItemNode",
    "ModuleSyntax",
    # Entities
    "Declaration",
    "Diagnostic",
    "CheckResult",
    # Configuration
    "SortConfig",
]
