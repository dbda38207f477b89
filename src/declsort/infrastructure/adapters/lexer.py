"""Rust lexer (tokenizer).

Converts source text into the tokens the item parser needs.
Handles: identifiers, raw identifiers, lifetimes, string/char/byte
literals (raw included), numbers, punctuation, comments.
Doc comments are kept as tokens; other comments are skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from declsort.domain.exceptions.parsing import LexerError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


class TokenType(Enum):
    """Types of tokens."""

    IDENT = auto()  # foo, r#type
    LIFETIME = auto()  # 'a
    STRING = auto()  # "text", r#"text"#
    BYTE_STRING = auto()  # b"text"
    CHAR = auto()  # 'c', b'c'
    NUMBER = auto()  # 1, 0x1f, 1.5e3f64
    PATH_SEP = auto()  # ::
    PUNCT = auto()  # any other single character
    OUTER_DOC = auto()  # /// text, /** text */
    INNER_DOC = auto()  # //! text, /*! text */
    EOF = auto()


OPEN_DELIMITERS = frozenset("([{")
CLOSE_DELIMITERS = frozenset(")]}")


@dataclass(frozen=True, slots=True)
class Token:
    """A single token.

    Attributes:
        type: Token type
        value: Token text; contents for literals and doc comments
        line: Start line (1-based)
        column: Start column (0-based)
        offset: Start character offset
        end_line: End line
        end_column: End column (exclusive)
        end_offset: End character offset (exclusive)
    """

    type: TokenType
    value: str
    line: int
    column: int
    offset: int
    end_line: int
    end_column: int
    end_offset: int

    def is_punct(self, char: str) -> bool:
        return self.type is TokenType.PUNCT and self.value == char

    def is_keyword(self, word: str) -> bool:
        return self.type is TokenType.IDENT and self.value == word


class Lexer:
    """Tokenizer for Rust source.

    Usage:
        lexer = Lexer(source_text, Path("src/lib.rs"))
        tokens = list(lexer.tokenize())
    """

    def __init__(self, source: str, path: Path) -> None:
        self.source = source
        self.path = path
        self.pos = 0
        self.line = 1
        self.column = 0
        self.length = len(source)

    def _current(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= self.length:
            return None
        return self.source[self.pos]

    def _peek(self, offset: int = 1) -> str | None:
        """Peek ahead by offset characters."""
        pos = self.pos + offset
        if pos >= self.length:
            return None
        return self.source[pos]

    def _advance(self) -> str | None:
        """Advance one character and return it."""
        ch = self._current()
        if ch is not None:
            self.pos += 1
            if ch == "\n":
                self.line += 1
                self.column = 0
            else:
                self.column += 1
        return ch

    def _startswith(self, text: str) -> bool:
        return self.source.startswith(text, self.pos)

    def _error(self, reason: str, line: int | None = None, column: int | None = None) -> LexerError:
        return LexerError(
            self.path,
            self.line if line is None else line,
            self.column if column is None else column,
            reason,
        )

    def tokenize(self) -> Iterator[Token]:
        """Generate tokens, ending with a single EOF token.

        Raises:
            LexerError: On unterminated literals or comments
        """
        self._skip_shebang()

        while True:
            self._skip_whitespace()
            ch = self._current()
            if ch is None:
                break

            start = (self.line, self.column, self.pos)

            if self._startswith("//"):
                token = self._read_line_comment(start)
            elif self._startswith("/*"):
                token = self._read_block_comment(start)
            elif ch == '"':
                token = self._finish(TokenType.STRING, self._read_quoted('"'), start)
            elif ch == "'":
                token = self._read_char_or_lifetime(start)
            elif ch.isdigit():
                token = self._finish(TokenType.NUMBER, self._read_number(), start)
            elif ch == "_" or ch.isalpha():
                token = self._read_word(start)
            elif self._startswith("::"):
                self._advance()
                self._advance()
                token = self._finish(TokenType.PATH_SEP, "::", start)
            else:
                self._advance()
                token = self._finish(TokenType.PUNCT, ch, start)

            if token is not None:
                yield token

        yield self._finish(TokenType.EOF, "", (self.line, self.column, self.pos))

    def _finish(self, token_type: TokenType, value: str, start: tuple[int, int, int]) -> Token:
        line, column, offset = start
        return Token(
            type=token_type,
            value=value,
            line=line,
            column=column,
            offset=offset,
            end_line=self.line,
            end_column=self.column,
            end_offset=self.pos,
        )

    def _skip_shebang(self) -> None:
        """Skip `#!` first line, unless it starts an inner attribute `#![`."""
        if self._startswith("#!") and not self.source[2:].lstrip().startswith("["):
            while self._current() not in (None, "\n"):
                self._advance()

    def _skip_whitespace(self) -> None:
        while (ch := self._current()) is not None and ch.isspace():
            self._advance()

    def _read_line_comment(self, start: tuple[int, int, int]) -> Token | None:
        """Read `//` comment. Returns a token for doc comments only."""
        token_type: TokenType | None = None
        if self._startswith("///") and not self._startswith("////"):
            token_type = TokenType.OUTER_DOC
        elif self._startswith("//!"):
            token_type = TokenType.INNER_DOC

        marker = 3 if token_type is not None else 2
        for _ in range(marker):
            self._advance()

        text_start = self.pos
        while self._current() not in (None, "\n"):
            self._advance()

        if token_type is None:
            return None
        return self._finish(token_type, self.source[text_start : self.pos], start)

    def _read_block_comment(self, start: tuple[int, int, int]) -> Token | None:
        """Read nested `/* */` comment. Returns a token for doc comments only."""
        token_type: TokenType | None = None
        if self._startswith("/**") and not self._startswith("/***") and not self._startswith("/**/"):
            token_type = TokenType.OUTER_DOC
        elif self._startswith("/*!"):
            token_type = TokenType.INNER_DOC

        marker = 3 if token_type is not None else 2
        for _ in range(marker):
            self._advance()

        text_start = self.pos
        depth = 1
        while depth:
            if self._current() is None:
                raise self._error("unterminated block comment", start[0], start[1])
            if self._startswith("/*"):
                depth += 1
                self._advance()
            elif self._startswith("*/"):
                depth -= 1
                self._advance()
            self._advance()

        if token_type is None:
            return None
        return self._finish(token_type, self.source[text_start : self.pos - 2], start)

    def _read_quoted(self, quote: str) -> str:
        """Read a quoted literal with escapes kept verbatim; return contents."""
        line, column = self.line, self.column
        self._advance()  # opening quote
        content_start = self.pos

        while True:
            ch = self._current()
            if ch is None:
                raise self._error("unterminated literal", line, column)
            if ch == "\\":
                self._advance()
                if self._current() is None:
                    raise self._error("unterminated literal", line, column)
                self._advance()
                continue
            if ch == quote:
                content = self.source[content_start : self.pos]
                self._advance()  # closing quote
                return content
            self._advance()

    def _read_raw_string(self) -> str:
        """Read r"..." / r#"..."#; return contents escaped as a plain string."""
        line, column = self.line, self.column
        self._advance()  # r
        hashes = 0
        while self._current() == "#":
            hashes += 1
            self._advance()
        if self._current() != '"':
            raise self._error("malformed raw string", line, column)
        self._advance()

        terminator = '"' + "#" * hashes
        end = self.source.find(terminator, self.pos)
        if end < 0:
            raise self._error("unterminated raw string", line, column)

        content = self.source[self.pos : end]
        while self.pos < end + len(terminator):
            self._advance()
        return content.replace("\\", "\\\\").replace('"', '\\"')

    def _read_char_or_lifetime(self, start: tuple[int, int, int]) -> Token:
        """Disambiguate 'c' (char) from 'a (lifetime or label)."""
        if self._peek() == "\\" or (self._peek() is not None and self._peek(2) == "'"):
            return self._finish(TokenType.CHAR, self._read_quoted("'"), start)

        self._advance()  # '
        name_start = self.pos
        while (ch := self._current()) is not None and (ch == "_" or ch.isalnum()):
            self._advance()
        if self.pos == name_start:
            raise self._error("unexpected quote", start[0], start[1])
        return self._finish(TokenType.LIFETIME, self.source[name_start : self.pos], start)

    def _read_number(self) -> str:
        """Read numeric literal including suffix (1_000u32, 0x1F, 1.5e-3f64)."""
        start = self.pos
        while (ch := self._current()) is not None:
            if ch.isalnum() or ch == "_":
                self._advance()
            elif ch == "." and (nxt := self._peek()) is not None and nxt.isdigit():
                self._advance()
            elif ch in "+-" and self.source[self.pos - 1] in "eE" and not self._is_hex(start):
                self._advance()
            else:
                break
        return self.source[start : self.pos]

    def _is_hex(self, start: int) -> bool:
        return self.source[start : start + 2].lower() == "0x"

    def _read_word(self, start: tuple[int, int, int]) -> Token:
        """Read identifier, or a prefixed literal (b"", r"", br"", c"", r#ident)."""
        ch = self._current()
        nxt = self._peek()

        if ch in "bc" and nxt == '"':
            self._advance()
            kind = TokenType.BYTE_STRING if ch == "b" else TokenType.STRING
            return self._finish(kind, self._read_quoted('"'), start)
        if ch == "b" and nxt == "'":
            self._advance()
            return self._finish(TokenType.CHAR, self._read_quoted("'"), start)
        if ch in "bc" and nxt == "r" and self._peek(2) in ('"', "#"):
            self._advance()
            kind = TokenType.BYTE_STRING if ch == "b" else TokenType.STRING
            return self._finish(kind, self._read_raw_string(), start)
        if ch == "r" and nxt == '"':
            return self._finish(TokenType.STRING, self._read_raw_string(), start)
        if ch == "r" and nxt == "#":
            after = self._peek(2)
            if after in ('"', "#"):
                return self._finish(TokenType.STRING, self._read_raw_string(), start)
            if after is not None and (after == "_" or after.isalpha()):
                self._advance()
                self._advance()  # raw identifier: keep the bare name

        name_start = self.pos
        while (ch := self._current()) is not None and (ch == "_" or ch.isalnum()):
            self._advance()
        return self._finish(TokenType.IDENT, self.source[name_start : self.pos], start)
