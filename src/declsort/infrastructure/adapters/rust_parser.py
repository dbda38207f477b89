"""Rust source parser adapter.

Implements SourceParserPort for `.rs` files. Only the module's top level
is parsed in detail: `extern crate`, `mod` and `use` items with their
outer attributes and visibility. Every other item is skipped by matching
delimiters and reported as ItemKind.OTHER.
"""

from __future__ import annotations

import fnmatch
import logging
import re
from pathlib import Path

from declsort.domain.exceptions.parsing import ParsingError
from declsort.domain.model.annotation import (
    Annotation,
    ListAnnotation,
    Literal,
    NameValue,
    Word,
)
from declsort.domain.model.enums import ItemKind, LiteralKind, UseTreeKind, Visibility
from declsort.domain.model.location import Location
from declsort.domain.model.syntax import ItemNode, ModuleSyntax, UseTree
from declsort.domain.ports.source_parser import SourceParserPort
from declsort.infrastructure.adapters.lexer import (
    CLOSE_DELIMITERS,
    OPEN_DELIMITERS,
    Lexer,
    Token,
    TokenType,
)

logger = logging.getLogger(__name__)

# Files whose `mod x;` children live next to them rather than in a
# directory named after the file.
MOD_ROOT_FILES = frozenset({"lib.rs", "main.rs", "mod.rs"})

_FLOAT_LITERAL = re.compile(r"[0-9][0-9_]*(\.[0-9][0-9_]*)?([eE][+-]?[0-9_]+)?(f32|f64)?")

_LITERAL_KINDS: dict[TokenType, LiteralKind] = {
    TokenType.STRING: LiteralKind.STR,
    TokenType.BYTE_STRING: LiteralKind.BYTE_STR,
    TokenType.CHAR: LiteralKind.CHAR,
}


class RustSourceParser(SourceParserPort):
    """Parser extracting top-level declarations from Rust source.

    Stateless between calls.

    FAIL-FIRST: raises ParsingError on unreadable files, malformed
    declarations and unbalanced delimiters.
    """

    def parse_source(self, source: str, path: Path) -> ModuleSyntax:
        """Parse source text.

        Args:
            source: Module source text
            path: Path used for spans and `mod x;` resolution

        Returns:
            Parsed ModuleSyntax

        Raises:
            ParsingError: If the text cannot be parsed
        """
        tokens = tuple(Lexer(source, path).tokenize())
        items = _ItemParser(tokens, path).parse_items()
        logger.debug("%s: %d top-level item(s)", path, len(items))
        return ModuleSyntax(path=path, source=source, items=items)

    def parse_file(self, path: Path) -> ModuleSyntax:
        """Parse single `.rs` file.

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        # Read file - FAIL-FIRST on file errors
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ParsingError(path, "file not found") from e
        except PermissionError as e:
            raise ParsingError(path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise ParsingError(path, f"encoding error: {e}") from e

        return self.parse_source(source, path)

    def parse_directory(self, path: Path, exclude: tuple[str, ...] = ()) -> tuple[ModuleSyntax, ...]:
        """Parse every `.rs` file below a directory, skipping `target/`.

        Args:
            path: Root directory path
            exclude: Glob patterns matched against paths relative to `path`

        Returns:
            Parsed modules sorted by path

        Raises:
            ParsingError: If the directory is missing or any file cannot be parsed
        """
        if not path.is_dir():
            raise ParsingError(path, "not a directory")

        modules: list[ModuleSyntax] = []
        for rs_file in sorted(path.rglob("*.rs")):
            relative = rs_file.relative_to(path)
            if "target" in relative.parts:
                continue
            if any(fnmatch.fnmatch(relative.as_posix(), pattern) for pattern in exclude):
                logger.debug("%s: excluded", rs_file)
                continue

            modules.append(self.parse_file(rs_file))

        logger.info("parsed %d file(s) below %s", len(modules), path)
        return tuple(modules)


def module_file(declaring_file: Path, name: str, path_attribute: str | None = None) -> Path:
    """Resolve the file that defines the body of `mod name;`.

    Args:
        declaring_file: File containing the declaration
        name: Module name
        path_attribute: Value of a `#[path = "..."]` annotation, if any

    Returns:
        `<dir>/name.rs` if it exists, else `<dir>/name/mod.rs` if it
        exists, else `<dir>/name.rs`. `<dir>` is the declaring file's
        directory for lib.rs/main.rs/mod.rs, and a directory named after
        the declaring file otherwise.
    """
    if path_attribute is not None:
        return declaring_file.parent / path_attribute

    if declaring_file.name in MOD_ROOT_FILES:
        directory = declaring_file.parent
    else:
        directory = declaring_file.parent / declaring_file.stem

    flat = directory / f"{name}.rs"
    nested = directory / name / "mod.rs"
    if not flat.exists() and nested.exists():
        return nested
    return flat


class _ItemParser:
    """Recursive-descent parser over one file's tokens."""

    def __init__(self, tokens: tuple[Token, ...], path: Path) -> None:
        self._tokens = tokens
        self._path = path
        self._pos = 0

    # Token helpers

    def _current(self) -> Token:
        return self._tokens[self._pos]

    def _peek(self, offset: int = 1) -> Token:
        return self._tokens[min(self._pos + offset, len(self._tokens) - 1)]

    def _advance(self) -> Token:
        token = self._tokens[self._pos]
        if token.type is not TokenType.EOF:
            self._pos += 1
        return token

    def _error(self, token: Token, reason: str) -> ParsingError:
        return ParsingError(self._path, f"{reason} at {token.line}:{token.column}")

    def _expect_punct(self, char: str) -> Token:
        token = self._current()
        if not token.is_punct(char):
            raise self._error(token, f"expected '{char}', found '{token.value or token.type.name}'")
        return self._advance()

    def _expect_ident(self) -> Token:
        token = self._current()
        if token.type is not TokenType.IDENT:
            raise self._error(token, f"expected identifier, found '{token.value or token.type.name}'")
        return self._advance()

    def _location(self, start: Token, end: Token) -> Location:
        return Location(
            file=self._path,
            line=start.line,
            column=start.column,
            end_line=end.end_line,
            end_column=end.end_column,
            offset=start.offset,
            end_offset=end.end_offset,
        )

    # Items

    def parse_items(self) -> tuple[ItemNode, ...]:
        items: list[ItemNode] = []

        while self._current().type is not TokenType.EOF:
            token = self._current()

            if token.type is TokenType.INNER_DOC:
                self._advance()
            elif token.is_punct("#") and self._peek().is_punct("!"):
                self._advance()
                self._advance()
                self._skip_group()  # inner attribute: #![...]
            elif token.is_punct(";"):
                self._advance()
            else:
                items.append(self._parse_item())

        return tuple(items)

    def _parse_item(self) -> ItemNode:
        start = self._current()
        attributes_pos = self._pos
        self._skip_outer_attributes()
        if self._current().type is TokenType.EOF:
            raise self._error(self._current(), "expected item after attributes")

        kind = self._declaration_kind()
        if kind is ItemKind.OTHER:
            # attributes of other items may hold arbitrary tokens
            end = self._skip_item()
            return ItemNode(kind=ItemKind.OTHER, ident="", span=self._location(start, end))

        self._pos = attributes_pos
        attributes = self._parse_outer_attributes()
        visibility, marker = self._parse_visibility()

        match kind:
            case ItemKind.EXTERN_CRATE:
                return self._parse_extern_crate(start, attributes, visibility, marker)
            case ItemKind.MOD:
                return self._parse_mod(start, attributes, visibility, marker)
            case _:
                return self._parse_use(start, attributes, visibility, marker)

    def _declaration_kind(self) -> ItemKind:
        """Kind of the item at the cursor (past its attributes), cursor unchanged."""
        pos = self._pos
        self._parse_visibility()
        token, following = self._current(), self._peek()
        self._pos = pos

        if token.is_keyword("extern") and following.is_keyword("crate"):
            return ItemKind.EXTERN_CRATE
        if token.is_keyword("mod") and following.type is TokenType.IDENT:
            return ItemKind.MOD
        if token.is_keyword("use"):
            return ItemKind.USE
        return ItemKind.OTHER

    def _parse_extern_crate(
        self,
        start: Token,
        attributes: tuple[Annotation, ...],
        visibility: Visibility,
        marker: str,
    ) -> ItemNode:
        self._advance()  # extern
        self._advance()  # crate
        ident = self._expect_ident().value

        alias: str | None = None
        if self._current().is_keyword("as"):
            self._advance()
            alias = self._expect_ident().value

        end = self._expect_punct(";")
        return ItemNode(
            kind=ItemKind.EXTERN_CRATE,
            ident=ident,
            span=self._location(start, end),
            attributes=attributes,
            visibility=visibility,
            visibility_marker=marker,
            alias=alias,
        )

    def _parse_mod(
        self,
        start: Token,
        attributes: tuple[Annotation, ...],
        visibility: Visibility,
        marker: str,
    ) -> ItemNode:
        self._advance()  # mod
        ident = self._expect_ident().value

        if self._current().is_punct("{"):
            body_start = self._current()
            end = self._skip_group()
            inner_span = self._location(body_start, end)
        else:
            end = self._expect_punct(";")
            body_file = module_file(self._path, ident, _path_attribute(attributes))
            inner_span = Location(
                file=body_file, line=1, column=0, end_line=1, end_column=0, offset=0, end_offset=0
            )

        return ItemNode(
            kind=ItemKind.MOD,
            ident=ident,
            span=self._location(start, end),
            attributes=attributes,
            visibility=visibility,
            visibility_marker=marker,
            inner_span=inner_span,
        )

    def _parse_use(
        self,
        start: Token,
        attributes: tuple[Annotation, ...],
        visibility: Visibility,
        marker: str,
    ) -> ItemNode:
        self._advance()  # use
        body_start = self._current()
        tree = self._parse_use_tree()
        body_end = self._tokens[self._pos - 1]
        end = self._expect_punct(";")
        return ItemNode(
            kind=ItemKind.USE,
            ident="",
            span=self._location(start, end),
            attributes=attributes,
            visibility=visibility,
            visibility_marker=marker,
            use_tree=tree,
            body_span=self._location(body_start, body_end),
        )

    def _parse_use_tree(self) -> UseTree:
        prefix: list[str] = []

        if self._current().type is TokenType.PATH_SEP:
            self._advance()
            prefix.append("")

        while True:
            token = self._current()
            if token.is_punct("{"):
                return UseTree(
                    kind=UseTreeKind.NESTED,
                    prefix=tuple(prefix),
                    children=self._parse_use_group(),
                )
            if token.is_punct("*"):
                self._advance()
                return UseTree(kind=UseTreeKind.GLOB, prefix=tuple(prefix))

            prefix.append(self._expect_ident().value)
            if self._current().type is not TokenType.PATH_SEP:
                break
            self._advance()

        alias: str | None = None
        if self._current().is_keyword("as"):
            self._advance()
            alias = self._expect_ident().value

        return UseTree(kind=UseTreeKind.SIMPLE, prefix=tuple(prefix), alias=alias)

    def _parse_use_group(self) -> tuple[UseTree, ...]:
        self._expect_punct("{")
        children: list[UseTree] = []

        while not self._current().is_punct("}"):
            children.append(self._parse_use_tree())
            if self._current().is_punct(","):
                self._advance()
            elif not self._current().is_punct("}"):
                raise self._error(self._current(), "expected ',' or '}' in use list")

        self._advance()  # }
        return tuple(children)

    # Attributes

    def _parse_outer_attributes(self) -> tuple[Annotation, ...]:
        attributes: list[Annotation] = []

        while True:
            token = self._current()
            if token.type is TokenType.OUTER_DOC:
                self._advance()
                value = token.value.replace("\\", "\\\\").replace('"', '\\"')
                attributes.append(NameValue(name="doc", value=Literal(LiteralKind.STR, value)))
            elif token.is_punct("#") and self._peek().is_punct("["):
                self._advance()
                self._advance()
                attributes.append(self._parse_meta())
                self._expect_punct("]")
            else:
                return tuple(attributes)

    def _skip_outer_attributes(self) -> None:
        while True:
            token = self._current()
            if token.type is TokenType.OUTER_DOC:
                self._advance()
            elif token.is_punct("#") and self._peek().is_punct("["):
                self._advance()
                self._skip_group()
            else:
                return

    def _parse_meta(self) -> Annotation:
        """Parse `name`, `name(children)` or `name = literal`."""
        token = self._current()
        if token.type in _LITERAL_KINDS or token.type is TokenType.NUMBER:
            # bare literal inside a list, e.g. align(8): kept as written
            self._advance()
            return Word(name=_literal_source(token))

        name = self._parse_meta_path()

        if self._current().is_punct("("):
            self._advance()
            children: list[Annotation] = []
            while not self._current().is_punct(")"):
                children.append(self._parse_meta())
                if self._current().is_punct(","):
                    self._advance()
                elif not self._current().is_punct(")"):
                    raise self._error(self._current(), "expected ',' or ')' in attribute")
            self._advance()
            return ListAnnotation(name=name, children=tuple(children))

        if self._current().is_punct("="):
            self._advance()
            return NameValue(name=name, value=self._parse_literal())

        return Word(name=name)

    def _parse_meta_path(self) -> str:
        segments: list[str] = []
        if self._current().type is TokenType.PATH_SEP:
            self._advance()
            segments.append("")
        segments.append(self._expect_ident().value)
        while self._current().type is TokenType.PATH_SEP:
            self._advance()
            segments.append(self._expect_ident().value)
        return "::".join(segments)

    def _parse_literal(self) -> Literal:
        token = self._advance()
        if token.type in _LITERAL_KINDS:
            return Literal(_LITERAL_KINDS[token.type], token.value)
        if token.type is TokenType.NUMBER:
            match = _FLOAT_LITERAL.fullmatch(token.value)
            is_float = match is not None and any(match.groups())
            return Literal(LiteralKind.FLOAT if is_float else LiteralKind.INT, token.value)
        if token.is_keyword("true") or token.is_keyword("false"):
            return Literal(LiteralKind.BOOL, token.value)
        if token.is_punct("-") and self._current().type is TokenType.NUMBER:
            number = self._parse_literal()
            return Literal(number.kind, f"-{number.value}")
        raise self._error(token, "expected literal in attribute")

    # Visibility

    def _parse_visibility(self) -> tuple[Visibility, str]:
        """Parse `pub`, `pub(crate)`, `pub(in a::b)`; return visibility and marker."""
        if not self._current().is_keyword("pub"):
            return Visibility.PRIVATE, "pub"

        self._advance()
        if not self._current().is_punct("("):
            return Visibility.PUBLIC, "pub"

        restriction = self._peek()
        if not any(restriction.is_keyword(word) for word in ("crate", "super", "self", "in")):
            # tuple-struct field style parens are not a restriction
            return Visibility.PUBLIC, "pub"

        self._advance()  # (
        parts: list[str] = []
        while not self._current().is_punct(")"):
            token = self._advance()
            if token.type is TokenType.EOF:
                raise self._error(token, "unterminated visibility restriction")
            parts.append(f"{token.value} " if token.is_keyword("in") else token.value)
        self._advance()  # )
        return Visibility.PUBLIC, f"pub({''.join(parts)})"

    # Skipping

    def _skip_group(self) -> Token:
        """Skip a delimited group starting at the current token; return its closer."""
        opener = self._current()
        if opener.type is not TokenType.PUNCT or opener.value not in OPEN_DELIMITERS:
            raise self._error(opener, "expected opening delimiter")

        depth = 0
        while True:
            token = self._advance()
            if token.type is TokenType.EOF:
                raise self._error(opener, f"unclosed '{opener.value}'")
            if token.type is TokenType.PUNCT:
                if token.value in OPEN_DELIMITERS:
                    depth += 1
                elif token.value in CLOSE_DELIMITERS:
                    depth -= 1
                    if depth == 0:
                        return token

    def _skip_item(self) -> Token:
        """Skip any other item: up to `;` at depth 0 or a top-level `{...}`."""
        last = self._current()
        while True:
            token = self._current()
            if token.type is TokenType.EOF:
                raise self._error(last, "unexpected end of file inside item")
            if token.type is TokenType.PUNCT:
                if token.value in OPEN_DELIMITERS:
                    closer = self._skip_group()
                    if token.value == "{":
                        return closer
                    last = closer
                    continue
                if token.value in CLOSE_DELIMITERS:
                    raise self._error(token, f"unmatched '{token.value}'")
                if token.value == ";":
                    return self._advance()
            last = self._advance()


def _path_attribute(attributes: tuple[Annotation, ...]) -> str | None:
    """Value of a `#[path = "..."]` annotation."""
    for attribute in attributes:
        if isinstance(attribute, NameValue) and attribute.name == "path":
            if attribute.value.kind is LiteralKind.STR:
                return attribute.value.value
    return None


def _literal_source(token: Token) -> str:
    """Literal as written in source, for literals kept verbatim."""
    match token.type:
        case TokenType.STRING:
            return f'"{token.value}"'
        case TokenType.BYTE_STRING:
            return f'b"{token.value}"'
        case TokenType.CHAR:
            return f"'{token.value}'"
        case _:
            return token.value
