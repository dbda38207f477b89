"""Base exceptions for declsort domain."""


class DeclSortError(Exception):
    """Root exception for all declsort errors.

    All domain exceptions inherit from this.
    Allows catching all declsort-specific errors.
    """
