"""Plain text reporter.

Stdlib-only reporter in compiler-diagnostic style:
    path:line:column: warning: <message>
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from declsort.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from declsort.domain.model.check_result import CheckResult
    from declsort.domain.model.diagnostic import Diagnostic


class PlainTextReporter(BaseReporter):
    """Plain text reporter.

    One block per diagnostic followed by a summary line.
    """

    def __init__(self, *, show_summary: bool = True) -> None:
        """Initialize reporter.

        Args:
            show_summary: Append the summary line
        """
        self._show_summary = show_summary

    def report(self, result: CheckResult) -> str:
        """Report check results as plain text.

        Args:
            result: Complete check result

        Returns:
            Report text, newline-terminated
        """
        lines: list[str] = []

        for diagnostic in result.diagnostics:
            lines.extend(self._format_diagnostic(diagnostic))
            lines.append("")

        if self._show_summary:
            lines.append(self._format_summary(result))

        return "\n".join(lines) + "\n" if lines else ""

    def _format_diagnostic(self, diagnostic: Diagnostic) -> list[str]:
        """Format one diagnostic, message indented under the location line."""
        first, *rest = diagnostic.message.splitlines()
        lines = [f"{diagnostic.location}: {diagnostic.severity.name.lower()}: {first}"]
        lines.extend(f"    {line}" if line else "" for line in rest)
        lines.append(f"    [{diagnostic.rule_name}]")
        return lines

    def _format_summary(self, result: CheckResult) -> str:
        """Format summary line."""
        status = "PASSED" if result.passed else "FAILED"
        return (
            f"{status}: {result.module_count} module(s) checked, "
            f"{result.diagnostic_count} diagnostic(s)"
        )
