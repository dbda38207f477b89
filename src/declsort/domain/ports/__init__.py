"""Domain ports (interfaces for infrastructure)."""

from declsort.domain.ports.reporter import ReporterProtocol
from declsort.domain.ports.source_map import SourceMapPort
from declsort.domain.ports.source_parser import SourceParserPort

__all__ = [
    "ReporterProtocol",
    "SourceMapPort",
    "SourceParserPort",
]
