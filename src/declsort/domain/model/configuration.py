"""Rule configuration.

None of the options change the ordering itself; they name the implicit
entries the rule must skip and select what is checked.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from declsort.domain.model.enums import Category


@dataclass(frozen=True, slots=True)
class SortConfig:
    """Configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        std_crate: Implicit standard library dependency, never checked
        prelude_path: Implicit prelude namespace; wildcard imports of it
            (or anything below it) are never checked
        doc_marker: Name-value annotation key dropped from rendered forms
        categories: Categories to check
        exclude: Glob patterns of files skipped by directory checks
    """

    std_crate: str = "std"
    prelude_path: str = "std::prelude"
    doc_marker: str = "doc"
    categories: frozenset[Category] = field(default_factory=lambda: frozenset(Category))
    exclude: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.std_crate:
            raise ValueError("std_crate must not be empty")
        if not self.prelude_path:
            raise ValueError("prelude_path must not be empty")
        if not self.doc_marker:
            raise ValueError("doc_marker must not be empty")
        if not self.categories:
            raise ValueError("categories must not be empty")
        for category in self.categories:
            if not isinstance(category, Category):
                raise TypeError(f"categories must contain Category, got {category!r}")

    def is_enabled(self, category: Category) -> bool:
        """Check if a category is checked."""
        return category in self.categories

    def is_prelude(self, path: str) -> bool:
        """Check if an import path is the prelude namespace or lies below it."""
        return path == self.prelude_path or path.startswith(f"{self.prelude_path}::")
