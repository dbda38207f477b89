"""DeclSort: public entry point.

Wires the Rust parser, file source map and checker together.

Example:
    ds = DeclSort.from_pyproject()
    result = ds.check_directory(Path("src"))
    print(PlainTextReporter().report(result))
    ds.assert_check(result)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Self

from declsort.application.reporters import PlainTextReporter
from declsort.application.services import DeclarationOrderChecker, apply_fixes
from declsort.domain.exceptions.violation import OrderingViolationError
from declsort.domain.model.check_result import CheckResult
from declsort.domain.model.configuration import SortConfig
from declsort.infrastructure.adapters.rust_parser import RustSourceParser
from declsort.infrastructure.adapters.source_map import FileSourceMap
from declsort.infrastructure.config_loader import load_config

if TYPE_CHECKING:
    from declsort.domain.ports.reporter import ReporterProtocol
    from declsort.domain.ports.source_map import SourceMapPort
    from declsort.domain.ports.source_parser import SourceParserPort

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_PATH = Path("lib.rs")


class DeclSort:
    """Facade for checking and fixing declaration order."""

    def __init__(
        self,
        config: SortConfig | None = None,
        *,
        parser: SourceParserPort | None = None,
        source_map: SourceMapPort | None = None,
    ) -> None:
        """Initialize facade.

        Args:
            config: Rule configuration (defaults if None)
            parser: Source parser (RustSourceParser if None)
            source_map: Source map (FileSourceMap if None)
        """
        self._config = config or SortConfig()
        self._parser = parser or RustSourceParser()
        self._checker = DeclarationOrderChecker(source_map or FileSourceMap(), self._config)

    @classmethod
    def from_pyproject(cls, start: Path | None = None) -> Self:
        """Create facade configured from the nearest pyproject.toml."""
        return cls(load_config(start))

    @property
    def config(self) -> SortConfig:
        """Active configuration."""
        return self._config

    def check_source(self, source: str, path: Path = DEFAULT_SOURCE_PATH) -> CheckResult:
        """Check source text.

        Args:
            source: Rust module text
            path: Path the text belongs to

        Raises:
            ParsingError: If the text cannot be parsed
        """
        return self._checker.check_modules((self._parser.parse_source(source, path),))

    def check_file(self, path: Path) -> CheckResult:
        """Check one `.rs` file.

        Raises:
            ParsingError: If the file cannot be read or parsed
        """
        return self._checker.check_modules((self._parser.parse_file(path),))

    def check_directory(self, path: Path) -> CheckResult:
        """Check every `.rs` file below a directory, honouring `exclude`.

        Raises:
            ParsingError: If any file cannot be parsed
        """
        return self._checker.check_modules(self._parser.parse_directory(path, self._config.exclude))

    def fix_source(self, source: str, path: Path = DEFAULT_SOURCE_PATH) -> str:
        """Return source with all suggestions applied."""
        module = self._parser.parse_source(source, path)
        return apply_fixes(module.source, self._checker.check_module(module))

    def fix_file(self, path: Path) -> bool:
        """Apply suggestions to a file in place.

        Returns:
            True if the file was rewritten
        """
        module = self._parser.parse_file(path)
        diagnostics = self._checker.check_module(module)
        if not diagnostics:
            return False

        path.write_text(apply_fixes(module.source, diagnostics), encoding="utf-8")
        logger.info("%s: applied %d fix(es)", path, len(diagnostics))
        return True

    def report(self, result: CheckResult, reporter: ReporterProtocol | None = None) -> str:
        """Format a result (plain text if no reporter is given)."""
        return (reporter or PlainTextReporter()).report(result)

    def assert_check(self, result: CheckResult) -> None:
        """Raise if the result has diagnostics.

        Raises:
            OrderingViolationError: If any declaration block is unsorted
        """
        if not result.passed:
            raise OrderingViolationError(result.diagnostics)
