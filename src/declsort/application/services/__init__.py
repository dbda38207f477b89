"""Application services."""

from declsort.application.services.fixer import apply_fixes
from declsort.application.services.order_checker import DeclarationOrderChecker

__all__ = [
    "DeclarationOrderChecker",
    "apply_fixes",
]
