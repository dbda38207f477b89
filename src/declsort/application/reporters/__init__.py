"""Reporters for declaration order results.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders with rich.
"""

from declsort.application.reporters._base import BaseReporter
from declsort.application.reporters.console import ConsoleConfig, ConsoleReporter
from declsort.application.reporters.json_reporter import JSONReporter
from declsort.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
