"""Check result aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from declsort.domain.model.diagnostic import Diagnostic
from declsort.domain.model.enums import Category, Severity


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of checking one or more modules.

    Immutable aggregate consumed by reporters.

    Attributes:
        diagnostics: All diagnostics, in module then category order
        modules: Paths of the checked modules
    """

    diagnostics: tuple[Diagnostic, ...]
    modules: tuple[Path, ...] = ()

    @property
    def passed(self) -> bool:
        """Check if all modules are ordered (no diagnostics)."""
        return len(self.diagnostics) == 0

    @property
    def diagnostic_count(self) -> int:
        """Number of diagnostics."""
        return len(self.diagnostics)

    @property
    def module_count(self) -> int:
        """Number of checked modules."""
        return len(self.modules)

    @property
    def warning_count(self) -> int:
        """Number of WARNING severity diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity == Severity.WARNING)

    def by_category(self, category: Category) -> tuple[Diagnostic, ...]:
        """Diagnostics of one category."""
        return tuple(d for d in self.diagnostics if d.category is category)

    def for_file(self, path: Path) -> tuple[Diagnostic, ...]:
        """Diagnostics located in one file."""
        return tuple(d for d in self.diagnostics if d.location.file == path)

    def merge(self, other: CheckResult) -> CheckResult:
        """Concatenate two results."""
        return CheckResult(
            diagnostics=self.diagnostics + other.diagnostics,
            modules=self.modules + other.modules,
        )

    @classmethod
    def empty(cls) -> CheckResult:
        """Create empty check result (passed, nothing checked)."""
        return cls(diagnostics=())
