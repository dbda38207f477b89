"""Rendered declaration value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderedForm:
    """Canonical text of a declaration.

    The same value orders the declaration and is emitted in suggestions.

    Attributes:
        prefix: Annotation lines and visibility marker, newline-terminated
            where non-empty (e.g. '#[cfg(test)]\\npub ')
        name: Rendered body (e.g. 'foo::{self, a}')
        public: Whether the prefix carries a visibility marker
    """

    prefix: str
    name: str
    public: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("rendered name must not be empty")

    @property
    def sort_key(self) -> tuple[bool, str]:
        """Private before public, then ordinal comparison of the name."""
        return (self.public, self.name)

    def line(self, keyword: str) -> str:
        """Render as a complete declaration: `<prefix><keyword> <name>;`."""
        return f"{self.prefix}{keyword} {self.name};"
