"""Tests for domain/exceptions."""

from pathlib import Path

import pytest

from declsort.domain.exceptions import (
    AnnotationContractError,
    ConfigurationError,
    DeclSortError,
    LexerError,
    OrderingViolationError,
    ParsingError,
)
from declsort.domain.model.diagnostic import Diagnostic
from declsort.domain.model.enums import Category
from tests.factories import make_location


class TestHierarchy:
    """All exceptions derive from DeclSortError."""

    @pytest.mark.parametrize(
        "exc_type",
        [ParsingError, LexerError, AnnotationContractError, ConfigurationError, OrderingViolationError],
    )
    def test_inherits_base(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, DeclSortError)

    def test_lexer_error_is_parsing_error(self) -> None:
        assert issubclass(LexerError, ParsingError)


class TestParsingError:
    """Tests for ParsingError."""

    def test_message(self) -> None:
        error = ParsingError(Path("lib.rs"), "syntax error")
        assert error.path == Path("lib.rs")
        assert "Failed to parse lib.rs: syntax error" in str(error)

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must be non-empty"):
            ParsingError(Path("lib.rs"), "")

    def test_lexer_error_position(self) -> None:
        error = LexerError(Path("lib.rs"), 3, 7, "unterminated literal")
        assert error.line == 3
        assert error.column == 7
        assert "unterminated literal at 3:7" in str(error)


class TestAnnotationContractError:
    """Tests for AnnotationContractError."""

    def test_message(self) -> None:
        error = AnnotationContractError("path", "int")
        assert error.annotation_name == "path"
        assert "unexpected int literal for annotation 'path'" in str(error)


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_message(self) -> None:
        error = ConfigurationError("categories", "must not be empty")
        assert "Invalid option 'categories': must not be empty" in str(error)

    def test_empty_key_raises(self) -> None:
        with pytest.raises(ValueError, match="key must not be empty"):
            ConfigurationError("", "reason")


class TestOrderingViolationError:
    """Tests for OrderingViolationError."""

    def test_requires_diagnostics(self) -> None:
        with pytest.raises(ValueError, match="at least one diagnostic"):
            OrderingViolationError(())

    def test_message_lists_diagnostics(self) -> None:
        diagnostic = Diagnostic(
            rule_name="unsorted_declarations",
            category=Category.SUB_MODULE,
            location=make_location(),
            message="module declarations should be in alphabetical order!",
            suggestion="mod a;",
        )
        error = OrderingViolationError((diagnostic,))
        assert "Found 1 unsorted declaration block(s)" in str(error)
        assert "module declarations" in str(error)
