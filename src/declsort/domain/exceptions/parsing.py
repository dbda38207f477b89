"""Parsing exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from declsort.domain.exceptions.base import DeclSortError

if TYPE_CHECKING:
    from pathlib import Path


class ParsingError(DeclSortError):
    """Error while turning source text into module syntax.

    Attributes:
        path: File that failed to parse
        reason: Why parsing failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")


class LexerError(ParsingError):
    """Error during tokenization.

    Attributes:
        path: File being tokenized
        line: Line of the offending character (1-based)
        column: Column of the offending character (0-based)
    """

    def __init__(self, path: Path, line: int, column: int, reason: str) -> None:
        self.line = line
        self.column = column
        super().__init__(path, f"{reason} at {line}:{column}")
