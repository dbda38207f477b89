"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
Suitable for CI integration or editor tooling.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from declsort.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from declsort.domain.model.check_result import CheckResult
    from declsort.domain.model.diagnostic import Diagnostic, TextEdit
    from declsort.domain.model.location import Location


class JSONReporter(BaseReporter):
    """JSON reporter: outputs machine-readable JSON.

    Schema matches domain structure 1:1 with summary added.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, result: CheckResult) -> str:
        """Format check result as JSON string.

        Args:
            result: Complete check result

        Returns:
            JSON string with diagnostics and summary
        """
        data = {
            "passed": result.passed,
            "diagnostics": [_diagnostic_to_dict(d) for d in result.diagnostics],
            "summary": {
                "modules": result.module_count,
                "diagnostics": result.diagnostic_count,
                "warnings": result.warning_count,
            },
        }
        return json.dumps(data, indent=self._indent)


def _location_to_dict(loc: Location) -> dict[str, object]:
    """Convert Location to dict."""
    return {
        "file": str(loc.file),
        "line": loc.line,
        "column": loc.column,
        "end_line": loc.end_line,
        "end_column": loc.end_column,
        "offset": loc.offset,
        "end_offset": loc.end_offset,
    }


def _edit_to_dict(edit: TextEdit) -> dict[str, object]:
    """Convert TextEdit to dict."""
    return {
        "location": _location_to_dict(edit.location),
        "text": edit.text,
    }


def _diagnostic_to_dict(diagnostic: Diagnostic) -> dict[str, object]:
    """Convert Diagnostic to dict."""
    return {
        "rule": diagnostic.rule_name,
        "category": diagnostic.category.name.lower(),
        "severity": diagnostic.severity.name.lower(),
        "location": _location_to_dict(diagnostic.location),
        "message": diagnostic.message,
        "suggestion": diagnostic.suggestion,
        "replacements": [_edit_to_dict(e) for e in diagnostic.replacements],
    }
