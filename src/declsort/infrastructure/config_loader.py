"""Load [tool.declsort] from pyproject.toml. Infrastructure I/O only."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from declsort.domain.exceptions.configuration import ConfigurationError
from declsort.domain.model.configuration import SortConfig
from declsort.domain.model.enums import Category

logger = logging.getLogger(__name__)

TOOL_SECTION = "declsort"

_STRING_OPTIONS = ("std_crate", "prelude_path", "doc_marker")
_KNOWN_OPTIONS = frozenset((*_STRING_OPTIONS, "categories", "exclude"))


def find_pyproject(start: Path) -> Path | None:
    """Walk up from `start` to the nearest pyproject.toml."""
    current = start if start.is_dir() else start.parent
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> SortConfig:
    """Load configuration from the nearest pyproject.toml.

    Args:
        start: Directory (or file) to search from (default: cwd)

    Returns:
        SortConfig; defaults when no pyproject.toml or no [tool.declsort]

    Raises:
        ConfigurationError: If the file is malformed or an option is invalid
    """
    pyproject = find_pyproject(start or Path.cwd())
    if pyproject is None:
        logger.debug("no pyproject.toml found, using defaults")
        return SortConfig()

    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(str(pyproject), f"invalid TOML: {e}") from e

    section = data.get("tool", {}).get(TOOL_SECTION, {})
    logger.debug("loaded [tool.%s] from %s", TOOL_SECTION, pyproject)
    return config_from_mapping(section)


def config_from_mapping(section: dict[str, object]) -> SortConfig:
    """Build SortConfig from a [tool.declsort] table.

    Raises:
        ConfigurationError: On unknown keys or wrongly typed values
    """
    if not isinstance(section, dict):
        raise ConfigurationError(TOOL_SECTION, "must be a table")

    unknown = sorted(set(section) - _KNOWN_OPTIONS)
    if unknown:
        raise ConfigurationError(unknown[0], "unknown option")

    options: dict[str, object] = {}

    for key in _STRING_OPTIONS:
        if key in section:
            value = section[key]
            if not isinstance(value, str) or not value:
                raise ConfigurationError(key, "must be a non-empty string")
            options[key] = value

    if "categories" in section:
        options["categories"] = _parse_categories(section["categories"])

    if "exclude" in section:
        options["exclude"] = _parse_string_list("exclude", section["exclude"])

    return SortConfig(**options)  # type: ignore[arg-type]


def _parse_categories(value: object) -> frozenset[Category]:
    names = _parse_string_list("categories", value)
    if not names:
        raise ConfigurationError("categories", "must not be empty")

    categories: set[Category] = set()
    for name in names:
        try:
            categories.add(Category[name.upper()])
        except KeyError as e:
            valid = ", ".join(c.name.lower() for c in Category)
            raise ConfigurationError("categories", f"unknown category '{name}' (valid: {valid})") from e
    return frozenset(categories)


def _parse_string_list(key: str, value: object) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(key, "must be a list of strings")
    return tuple(value)
