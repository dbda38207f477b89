"""Divergence detection and suggestions."""

from declsort.application.diagnostics.detector import (
    RULE_NAME,
    SuggestionBuilder,
    check,
    find_divergence,
    header,
)

__all__ = [
    "RULE_NAME",
    "SuggestionBuilder",
    "check",
    "find_divergence",
    "header",
]
