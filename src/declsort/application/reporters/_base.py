"""Reporter base class.

PlainTextReporter, JSONReporter and ConsoleReporter derive from
BaseReporter and so satisfy ReporterProtocol.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from declsort.domain.model.check_result import CheckResult


class BaseReporter(ABC):
    """Abstract reporter: one CheckResult in, one string out.

    Output is str, not print(). Caller decides destination.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: CheckResult) -> str:
                return f"Diagnostics: {result.diagnostic_count}"
    """

    @abstractmethod
    def report(self, result: CheckResult) -> str:
        """Format check results.

        Args:
            result: Complete check result

        Returns:
            Formatted report
        """
