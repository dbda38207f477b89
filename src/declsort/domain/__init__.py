"""declsort domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, collections.abc
"""

from declsort.domain.exceptions import (
    AnnotationContractError,
    ConfigurationError,
    DeclSortError,
    LexerError,
    OrderingViolationError,
    ParsingError,
)
from declsort.domain.model import (
    Category,
    CheckResult,
    Declaration,
    Diagnostic,
    ImportMember,
    ImportShape,
    ItemKind,
    ItemNode,
    Location,
    ModuleSyntax,
    RenderedForm,
    Severity,
    SortConfig,
    UseTree,
    Visibility,
)
from declsort.domain.ports import (
    ReporterProtocol,
    SourceMapPort,
    SourceParserPort,
)

__all__ = [
    # Exceptions
    "DeclSortError",
    "ParsingError",
    "LexerError",
    "AnnotationContractError",
    "ConfigurationError",
    "OrderingViolationError",
    # Enums
    "Category",
    "ImportShape",
    "ItemKind",
    "Severity",
    "Visibility",
    # Value objects
    "Location",
    "ImportMember",
    "RenderedForm",
    "UseTree",
    "ItemNode",
    "ModuleSyntax",
    # Entities
    "Declaration",
    "Diagnostic",
    "CheckResult",
    "SortConfig",
    # Ports
    "SourceParserPort",
    "SourceMapPort",
    "ReporterProtocol",
]
