"""Source parser port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from declsort.domain.model.syntax import ModuleSyntax


class SourceParserPort(ABC):
    """Port for turning source files into module syntax.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def parse_source(self, source: str, path: Path) -> ModuleSyntax:
        """Parse source text.

        Args:
            source: Module source text
            path: Path the text belongs to (used for spans and
                module body resolution)

        Returns:
            Parsed ModuleSyntax

        Raises:
            ParsingError: If the text cannot be parsed
        """
        ...

    @abstractmethod
    def parse_file(self, path: Path) -> ModuleSyntax:
        """Parse single source file.

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        ...

    @abstractmethod
    def parse_directory(self, path: Path, exclude: tuple[str, ...] = ()) -> tuple[ModuleSyntax, ...]:
        """Parse every source file below a directory.

        Args:
            path: Root directory path
            exclude: Glob patterns of files to skip

        Returns:
            Parsed modules in path order

        Raises:
            ParsingError: If any file cannot be parsed
        """
        ...
