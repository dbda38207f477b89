"""pytest plugin for declsort.

Provides fixtures:
    declsort_config: SortConfig (override in conftest.py)
    declsort: DeclSort facade
    declsort_result: CheckResult for the configured source directory

Configuration (pytest.ini or pyproject.toml):
    declsort_source_dir: Directory with Rust sources (default: "src")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from declsort.presentation.pytest_plugin.fixtures import (
    declsort,
    declsort_config,
    declsort_result,
)

if TYPE_CHECKING:
    import pytest

__all__ = [
    "declsort",
    "declsort_config",
    "declsort_result",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "declsort_source_dir",
        "Directory with Rust sources checked by declsort_result",
        default="src",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the declsort marker."""
    config.addinivalue_line(
        "markers",
        "declsort: mark test as declaration order check",
    )
