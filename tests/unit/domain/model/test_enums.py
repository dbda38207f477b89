"""Tests for domain/model/enums.py."""

import pytest

from declsort.domain.model.enums import Category


class TestCategory:
    """Tests for Category properties."""

    def test_check_order(self) -> None:
        assert list(Category) == [Category.DEPENDENCY, Category.SUB_MODULE, Category.IMPORT]

    @pytest.mark.parametrize(
        ("category", "keyword"),
        [
            (Category.DEPENDENCY, "extern crate"),
            (Category.SUB_MODULE, "mod"),
            (Category.IMPORT, "use"),
        ],
    )
    def test_keyword(self, category: Category, keyword: str) -> None:
        assert category.keyword == keyword

    def test_description(self) -> None:
        assert Category.DEPENDENCY.description == "crate declarations"
        assert Category.SUB_MODULE.description == "module declarations"
        assert Category.IMPORT.description == "use statements"

    def test_dependencies_carry_no_visibility(self) -> None:
        assert not Category.DEPENDENCY.carries_visibility
        assert Category.SUB_MODULE.carries_visibility
        assert Category.IMPORT.carries_visibility
