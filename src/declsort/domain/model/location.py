"""Source location value object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Location:
    """Exact source range.

    Attributes:
        file: Path to source file
        line: Start line (1-based, must be > 0)
        column: Start column (0-based, must be >= 0)
        end_line: End line (inclusive, must be >= line)
        end_column: End column (exclusive)
        offset: Start character offset into the file text
        end_offset: End character offset (exclusive, must be >= offset)
    """

    file: Path
    line: int
    column: int
    end_line: int
    end_column: int
    offset: int
    end_offset: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file is None:
            raise TypeError("file must not be None")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")
        if self.end_line < self.line:
            raise ValueError(f"end_line ({self.end_line}) must be >= line ({self.line})")
        if self.end_column < 0:
            raise ValueError(f"end_column must be >= 0, got {self.end_column}")
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")
        if self.end_offset < self.offset:
            raise ValueError(f"end_offset ({self.end_offset}) must be >= offset ({self.offset})")

    def extend_to(self, other: Location) -> Location:
        """Return a location starting here and ending where `other` ends.

        Raises:
            ValueError: If `other` is in another file or ends before this one
        """
        if other.file != self.file:
            raise ValueError(f"cannot extend {self} into another file ({other.file})")
        if other.end_offset < self.end_offset:
            raise ValueError(f"cannot shrink {self} to end at offset {other.end_offset}")
        return replace(
            self,
            end_line=other.end_line,
            end_column=other.end_column,
            end_offset=other.end_offset,
        )

    def __str__(self) -> str:
        """Format as file:line:column."""
        return f"{self.file}:{self.line}:{self.column}"
