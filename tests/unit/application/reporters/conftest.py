"""Shared fixtures for reporter tests."""

from pathlib import Path

import pytest

from declsort.application.diagnostics import check
from declsort.application.ordering import canonical_order
from declsort.application.rendering import DeclarationRenderer
from declsort.domain.model.check_result import CheckResult
from declsort.domain.model.enums import Category
from tests.factories import DEFAULT_TEST_FILE, make_declaration


@pytest.fixture
def failed_result() -> CheckResult:
    """Result with one unsorted module block: `mod a; mod c; mod b;`."""
    original = tuple(make_declaration(n, line=i + 1) for i, n in enumerate(["a", "c", "b"]))
    renderer = DeclarationRenderer()
    diagnostic = check(original, canonical_order(original, renderer), Category.SUB_MODULE, renderer)
    assert diagnostic is not None
    return CheckResult(diagnostics=(diagnostic,), modules=(DEFAULT_TEST_FILE,))


@pytest.fixture
def passed_result() -> CheckResult:
    return CheckResult(diagnostics=(), modules=(Path("/test/lib.rs"), Path("/test/main.rs")))
