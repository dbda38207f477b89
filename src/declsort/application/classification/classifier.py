"""Classifier: module items → per-category declarations.

One pass over the module's items. Each bucket keeps source order.
Implicit entries are dropped here:
- the standard library dependency
- sub-modules whose body is written inline
- wildcard imports of the prelude
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from declsort.application.normalization import normalize
from declsort.domain.model.declaration import Declaration
from declsort.domain.model.enums import Category, ImportShape, ItemKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from declsort.domain.model.configuration import SortConfig
    from declsort.domain.model.syntax import ItemNode
    from declsort.domain.ports.source_map import SourceMapPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ClassifiedModule:
    """Declarations of one module, bucketed by category.

    Attributes:
        dependencies: `extern crate` declarations
        sub_modules: out-of-line `mod` declarations
        imports: `use` declarations
    """

    dependencies: tuple[Declaration, ...] = ()
    sub_modules: tuple[Declaration, ...] = ()
    imports: tuple[Declaration, ...] = ()

    def of(self, category: Category) -> tuple[Declaration, ...]:
        """Declarations of one category, in source order."""
        match category:
            case Category.DEPENDENCY:
                return self.dependencies
            case Category.SUB_MODULE:
                return self.sub_modules
            case Category.IMPORT:
                return self.imports


class Classifier:
    """Buckets module items into declaration categories.

    Stateless between classify() calls.
    """

    def __init__(self, config: SortConfig, source_map: SourceMapPort) -> None:
        """Initialize classifier.

        Args:
            config: Rule configuration (implicit names)
            source_map: Answers whether two spans share a source unit
        """
        if config is None:
            raise TypeError("config must not be None")
        if source_map is None:
            raise TypeError("source_map must not be None")

        self._config = config
        self._source_map = source_map

    def classify(self, items: Iterable[ItemNode]) -> ClassifiedModule:
        """Classify items in one pass.

        Args:
            items: Module-level items in source order

        Returns:
            ClassifiedModule with stable per-category order
        """
        dependencies: list[Declaration] = []
        sub_modules: list[Declaration] = []
        imports: list[Declaration] = []

        for item in items:
            match item.kind:
                case ItemKind.EXTERN_CRATE:
                    if item.ident == self._config.std_crate:
                        logger.debug("%s: skipping implicit crate %s", item.span, item.ident)
                        continue
                    dependencies.append(self._dependency(item))

                case ItemKind.MOD:
                    if item.inner_span is None:
                        raise TypeError(f"{item.span}: MOD item without inner_span")
                    if self._source_map.same_source(item.span, item.inner_span):
                        logger.debug("%s: skipping inline module %s", item.span, item.ident)
                        continue
                    sub_modules.append(self._sub_module(item))

                case ItemKind.USE:
                    declaration = self._import(item)
                    if declaration is None:
                        logger.debug("%s: skipping prelude import", item.span)
                        continue
                    imports.append(declaration)

                case ItemKind.OTHER:
                    continue

        return ClassifiedModule(
            dependencies=tuple(dependencies),
            sub_modules=tuple(sub_modules),
            imports=tuple(imports),
        )

    def _dependency(self, item: ItemNode) -> Declaration:
        name = item.ident if item.alias is None else f"{item.ident} as {item.alias}"
        return Declaration(
            name=name,
            category=Category.DEPENDENCY,
            visibility=item.visibility,
            span=item.span,
            annotations=item.attributes,
            visibility_marker=item.visibility_marker,
        )

    def _sub_module(self, item: ItemNode) -> Declaration:
        return Declaration(
            name=item.ident,
            category=Category.SUB_MODULE,
            visibility=item.visibility,
            span=item.span,
            annotations=item.attributes,
            visibility_marker=item.visibility_marker,
        )

    def _import(self, item: ItemNode) -> Declaration | None:
        if item.use_tree is None:
            raise TypeError(f"{item.span}: USE item without use_tree")
        normalized = normalize(item.use_tree)

        if normalized.shape is ImportShape.WILDCARD and self._config.is_prelude(
            item.use_tree.path.removeprefix("::")
        ):
            return None

        return Declaration(
            name=normalized.text,
            category=Category.IMPORT,
            visibility=item.visibility,
            span=item.span,
            annotations=item.attributes,
            visibility_marker=item.visibility_marker,
            shape=normalized.shape,
            members=normalized.members,
            flagged_internally=normalized.flagged_internally,
            body_span=item.body_span,
        )
