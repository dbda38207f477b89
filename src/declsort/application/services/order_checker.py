"""Main facade for declaration order checking.

DeclarationOrderChecker runs the whole pipeline for each module:
classify → render/sort → detect, once per category.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from declsort.application.classification import Classifier
from declsort.application.diagnostics import check
from declsort.application.ordering import canonical_order
from declsort.application.rendering import DeclarationRenderer
from declsort.domain.model.check_result import CheckResult
from declsort.domain.model.configuration import SortConfig
from declsort.domain.model.enums import Category

if TYPE_CHECKING:
    from collections.abc import Sequence

    from declsort.domain.model.diagnostic import Diagnostic
    from declsort.domain.model.syntax import ModuleSyntax
    from declsort.domain.ports.source_map import SourceMapPort

logger = logging.getLogger(__name__)


class DeclarationOrderChecker:
    """Checks module declaration ordering.

    Holds no per-module state: every check_module() call allocates its own
    renderer, so the checker can be shared between threads.

    Example:
        module = parser.parse_file(Path("src/lib.rs"))
        checker = DeclarationOrderChecker(FileSourceMap())
        for diagnostic in checker.check_module(module):
            print(diagnostic)
    """

    def __init__(self, source_map: SourceMapPort, config: SortConfig | None = None) -> None:
        """Initialize checker.

        Args:
            source_map: Source unit capability for the inline-module check
            config: Rule configuration (defaults if None)
        """
        self._config = config or SortConfig()
        self._classifier = Classifier(self._config, source_map)

    @property
    def config(self) -> SortConfig:
        """Active configuration."""
        return self._config

    def check_module(self, module: ModuleSyntax) -> tuple[Diagnostic, ...]:
        """Check one module.

        Categories are independent: each yields at most one diagnostic.

        Args:
            module: Parsed module

        Returns:
            Diagnostics in category order (crates, modules, uses)

        Raises:
            AnnotationContractError: If an annotation violates the host contract
        """
        renderer = DeclarationRenderer(self._config.doc_marker)
        classified = self._classifier.classify(module.items)

        diagnostics: list[Diagnostic] = []
        for category in Category:
            if not self._config.is_enabled(category):
                continue

            original = classified.of(category)
            diagnostic = check(
                original, canonical_order(original, renderer), category, renderer, module.source
            )
            if diagnostic is not None:
                logger.debug("%s: unsorted %s", diagnostic.location, category.description)
                diagnostics.append(diagnostic)

        return tuple(diagnostics)

    def check_modules(self, modules: Sequence[ModuleSyntax]) -> CheckResult:
        """Check several modules.

        Args:
            modules: Parsed modules

        Returns:
            CheckResult with diagnostics in module order
        """
        diagnostics: list[Diagnostic] = []
        for module in modules:
            diagnostics.extend(self.check_module(module))

        result = CheckResult(
            diagnostics=tuple(diagnostics),
            modules=tuple(module.path for module in modules),
        )
        logger.info(
            "checked %d module(s), %d diagnostic(s)",
            result.module_count,
            result.diagnostic_count,
        )
        return result
