"""Console reporter: CheckResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from declsort.application.diagnostics import header
from declsort.application.reporters._base import BaseReporter
from declsort.domain.model.enums import Category

if TYPE_CHECKING:
    from declsort.domain.model.check_result import CheckResult
    from declsort.domain.model.diagnostic import Diagnostic


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_suggestions: Render the suggested block of each diagnostic.
        show_summary: Render the per-category summary table.
        width: Console width in characters.
        theme: Pygments theme for suggestion highlighting.
    """

    show_suggestions: bool = True
    show_summary: bool = True
    width: int = 100
    theme: str = "ansi_dark"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text."""

    def __init__(self, config: ConsoleConfig | None = None, *, color: bool = True) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
            color: Emit terminal escape codes.
        """
        self._config = config or ConsoleConfig()
        self._color = color

    def report(self, result: CheckResult) -> str:
        """Format check result as rich formatted string.

        Args:
            result: Complete check result

        Returns:
            Formatted string with colors and tables
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._color,
            no_color=not self._color,
            width=self._config.width,
        )

        for diagnostic in result.diagnostics:
            self._render_diagnostic(console, diagnostic)

        if self._config.show_summary:
            self._render_summary(console, result)

        return output.getvalue()

    def _render_diagnostic(self, console: Console, diagnostic: Diagnostic) -> None:
        """Render one diagnostic with its suggestion panel."""
        console.print(
            f"[bold]{diagnostic.location}[/bold]: "
            f"[yellow]{diagnostic.severity.name.lower()}[/yellow]: "
            f"{header(diagnostic.category).splitlines()[0]} "
            f"[dim]\\[{diagnostic.rule_name}][/dim]",
            highlight=False,
        )

        if self._config.show_suggestions:
            syntax = Syntax(diagnostic.suggestion, "rust", theme=self._config.theme)
            console.print(Panel(syntax, title="Try this", title_align="left", expand=False))

        console.print()

    def _render_summary(self, console: Console, result: CheckResult) -> None:
        """Render summary table."""
        table = Table(title="Declaration Order")
        table.add_column("Category")
        table.add_column("Diagnostics", justify="right")

        for category in Category:
            table.add_row(category.description, str(len(result.by_category(category))))

        console.print(table)

        status = "[green]PASSED[/green]" if result.passed else "[red]FAILED[/red]"
        console.print(f"{status}: {result.module_count} module(s) checked")
