"""Diagnostic entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from declsort.domain.model.enums import Severity

if TYPE_CHECKING:
    from declsort.domain.model.enums import Category
    from declsort.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replacement of one source range.

    Attributes:
        location: Range to replace
        text: Replacement text
    """

    location: Location
    text: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.location is None:
            raise TypeError("location must not be None")
        if self.text is None:
            raise TypeError("text must not be None")


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Unsorted declaration block.

    One per category per module. The location covers every declaration
    from the first mismatch through the last one of the category.

    Attributes:
        rule_name: Name of the rule
        category: Checked category
        location: Source range from the first mismatch to the run's end
        message: Header followed by the suggested block
        suggestion: Suggested block alone
        replacements: Per-declaration edits realising the suggestion
        severity: Always WARNING for ordering issues
    """

    rule_name: str
    category: Category
    location: Location
    message: str
    suggestion: str
    replacements: tuple[TextEdit, ...] = ()
    severity: Severity = Severity.WARNING

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_name:
            raise ValueError("rule_name must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")
        if not self.suggestion:
            raise ValueError("suggestion must not be empty")
        if self.location is None:
            raise TypeError("location must not be None")

    def __str__(self) -> str:
        """Format diagnostic for display."""
        return f"{self.location}: {self.severity.name.lower()}: {self.message}"
