"""Ordering violation exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from declsort.domain.exceptions.base import DeclSortError

if TYPE_CHECKING:
    from declsort.domain.model.diagnostic import Diagnostic


class OrderingViolationError(DeclSortError):
    """Declaration ordering rules violated.

    Raised by assert_check() when diagnostics were produced.

    Attributes:
        diagnostics: All produced diagnostics
    """

    def __init__(self, diagnostics: tuple[Diagnostic, ...]) -> None:
        if not diagnostics:
            raise ValueError("OrderingViolationError requires at least one diagnostic")

        self.diagnostics = diagnostics

        msg_parts = [f"Found {len(diagnostics)} unsorted declaration block(s):"]
        for d in diagnostics:
            msg_parts.append(str(d))

        super().__init__("\n".join(msg_parts))
