"""Public API."""

from declsort.presentation.api.facade import DeclSort

__all__ = ["DeclSort"]
