"""Reporter protocol for output formatting.

Users extend declsort by implementing this Protocol.
NOT rich-specific - users can adapt to any output format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from declsort.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    Output is str, not print(). Caller decides destination.
    declsort provides PlainTextReporter, JSONReporter and ConsoleReporter.
    """

    def report(self, result: CheckResult) -> str:
        """Format check results.

        Args:
            result: Complete check result

        Returns:
            Formatted report
        """
        ...
