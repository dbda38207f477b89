"""Domain enumerations."""

from enum import Enum, auto


class Visibility(Enum):
    """Declaration visibility as written in source."""

    PUBLIC = auto()  # pub, pub(crate), ...
    PRIVATE = auto()  # no marker


class Severity(Enum):
    """Diagnostic severity."""

    ERROR = auto()
    WARNING = auto()
    INFO = auto()


class Category(Enum):
    """Declaration category checked independently of the others.

    Members are listed in the order categories are checked.
    """

    DEPENDENCY = auto()  # extern crate x;
    SUB_MODULE = auto()  # mod x;
    IMPORT = auto()  # use x;

    @property
    def keyword(self) -> str:
        """Source keyword introducing a declaration of this category."""
        match self:
            case Category.DEPENDENCY:
                return "extern crate"
            case Category.SUB_MODULE:
                return "mod"
            case Category.IMPORT:
                return "use"

    @property
    def description(self) -> str:
        """Human-readable plural name used in diagnostic headers."""
        match self:
            case Category.DEPENDENCY:
                return "crate declarations"
            case Category.SUB_MODULE:
                return "module declarations"
            case Category.IMPORT:
                return "use statements"

    @property
    def carries_visibility(self) -> bool:
        """Whether a public marker is part of the rendered declaration.

        Dependency declarations are rendered without one, so they never
        take part in the public-after-private partition.
        """
        return self is not Category.DEPENDENCY


class ImportShape(Enum):
    """Shape of an import declaration."""

    SIMPLE = auto()  # use a::b;
    RENAMED = auto()  # use a::b as c;
    LIST = auto()  # use a::{b, c};
    WILDCARD = auto()  # use a::*;


class ItemKind(Enum):
    """Kind of a module-level item supplied by the host."""

    EXTERN_CRATE = auto()
    MOD = auto()
    USE = auto()
    OTHER = auto()  # everything the rule ignores


class UseTreeKind(Enum):
    """Kind of a node in an import tree."""

    SIMPLE = auto()  # a::b, a::b as c
    GLOB = auto()  # a::*
    NESTED = auto()  # a::{...}


class LiteralKind(Enum):
    """Kind of literal appearing in an annotation value."""

    STR = auto()
    BYTE_STR = auto()
    INT = auto()
    FLOAT = auto()
    BOOL = auto()
    CHAR = auto()
