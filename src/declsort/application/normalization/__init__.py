"""Import normalization."""

from declsort.application.normalization.import_normalizer import (
    NormalizedImport,
    canonical_members,
    member_order_key,
    normalize,
)

__all__ = [
    "NormalizedImport",
    "canonical_members",
    "member_order_key",
    "normalize",
]
