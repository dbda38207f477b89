"""Source map port (interface)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from declsort.domain.model.location import Location


class SourceMapPort(Protocol):
    """Read-only view of which source unit a span comes from.

    This is the only host context the classifier needs: whether a
    module's body is defined in the file that declares it.
    """

    def same_source(self, first: Location, second: Location) -> bool:
        """Check whether two spans come from the same source unit."""
        ...
