"""declsort - ordering rule for Rust module declarations.

Checks that `extern crate`, `mod` and `use` declarations are sorted and
suggests the sorted block.
"""

__version__ = "0.1.0"

from declsort.presentation.api.facade import DeclSort

__all__ = ["DeclSort", "__version__"]
