"""File-based source map adapter.

Implements SourceMapPort by comparing the files spans point into.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from declsort.domain.model.location import Location


class FileSourceMap:
    """Two spans share a source unit when they point into the same file.

    Paths are compared lexically after normalisation (`a/./b.rs` equals
    `a/b.rs`); the filesystem is not consulted.
    """

    def same_source(self, first: Location, second: Location) -> bool:
        """Check whether two spans come from the same file."""
        return os.path.normpath(first.file) == os.path.normpath(second.file)
