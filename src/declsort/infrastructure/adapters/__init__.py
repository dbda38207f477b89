"""Infrastructure adapters implementing domain ports."""

from declsort.infrastructure.adapters.lexer import Lexer, Token, TokenType
from declsort.infrastructure.adapters.rust_parser import RustSourceParser, module_file
from declsort.infrastructure.adapters.source_map import FileSourceMap

__all__ = [
    "FileSourceMap",
    "Lexer",
    "RustSourceParser",
    "Token",
    "TokenType",
    "module_file",
]
