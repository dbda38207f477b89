"""Domain exceptions."""

from declsort.domain.exceptions.base import DeclSortError
from declsort.domain.exceptions.configuration import ConfigurationError
from declsort.domain.exceptions.contract import AnnotationContractError
from declsort.domain.exceptions.parsing import LexerError, ParsingError
from declsort.domain.exceptions.violation import OrderingViolationError

__all__ = [
    "DeclSortError",
    "ParsingError",
    "LexerError",
    "AnnotationContractError",
    "ConfigurationError",
    "OrderingViolationError",
]
