"""pytest fixtures for declaration order checks.

User overrides declsort_config in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from declsort.infrastructure.config_loader import load_config
from declsort.presentation.api.facade import DeclSort

if TYPE_CHECKING:
    from declsort.domain.model.check_result import CheckResult
    from declsort.domain.model.configuration import SortConfig


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback."""
    value = config.getini(name)
    if value:
        return str(value)
    return default


def _root_dir(request: pytest.FixtureRequest) -> Path:
    return Path(str(request.config.rootpath))


@pytest.fixture(scope="session")
def declsort_config(request: pytest.FixtureRequest) -> SortConfig:
    """Configuration from [tool.declsort] of the project's pyproject.toml.

    Override in conftest.py to configure in code.
    """
    return load_config(_root_dir(request))


@pytest.fixture(scope="session")
def declsort(declsort_config: SortConfig) -> DeclSort:
    """DeclSort facade using declsort_config."""
    return DeclSort(declsort_config)


@pytest.fixture(scope="session")
def declsort_result(request: pytest.FixtureRequest, declsort: DeclSort) -> CheckResult:
    """Check result for the configured source directory.

    Reads declsort_source_dir from ini (default: "src").
    """
    source_dir = _get_ini_value(request.config, "declsort_source_dir", "src")
    source_path = _root_dir(request) / source_dir

    if not source_path.exists():
        raise FileNotFoundError(
            f"declsort_source_dir '{source_path}' does not exist. "
            f"Configure declsort_source_dir in pytest.ini or pyproject.toml."
        )

    return declsort.check_directory(source_path)
