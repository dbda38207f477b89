"""Canonical ordering."""

from declsort.application.ordering.sort_engine import canonical_order, ordering_key

__all__ = [
    "canonical_order",
    "ordering_key",
]
