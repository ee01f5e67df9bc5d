"""Integration tests for the read-side use cases."""

import pytest

from catalog.application.list_categories import ListCategoriesHandler
from catalog.application.search_products import SearchProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import SearchCriteria, SortField, SortOrder
from tests.fakes import FakeProductRepository


def _repo() -> FakeProductRepository:
    products = [
        Product(name=f"Item {i:02d}", price=float(i), category="Misc" if i % 2 else "Books")
        for i in range(25)
    ]
    products.append(
        Product(name="Retired", price=1.0, category="Archive", is_active=False)
    )
    return FakeProductRepository(products)


class TestSearchProducts:

    def test_defaults_to_first_page_of_ten(self):
        page = SearchProductsHandler(_repo()).handle()
        assert len(page.items) == 10
        assert page.info.total_items == 25
        assert page.info.total_pages == 3

    def test_inactive_products_are_excluded(self):
        page = SearchProductsHandler(_repo()).handle(SearchCriteria(text="retired"))
        assert page.items == []
        assert page.info.total_items == 0

    def test_filter_sort_then_paginate(self):
        criteria = SearchCriteria(
            category="misc", sort_by=SortField.PRICE, sort_order=SortOrder.DESC
        )
        page = SearchProductsHandler(_repo()).handle(criteria, page=2, page_size=5)
        assert [p.price for p in page.items] == [13.0, 11.0, 9.0, 7.0, 5.0]
        assert page.info.total_items == 12
        assert page.info.has_next_page is True
        assert page.info.has_prev_page is True


class TestShowProduct:

    def test_returns_active_product(self):
        repo = _repo()
        target = repo.list_active()[3]
        assert ShowProductHandler(repo).handle(target.id) is target

    def test_inactive_product_not_found(self):
        repo = _repo()
        retired = repo.list_all()[-1]
        with pytest.raises(EntityNotFoundError, match="not found"):
            ShowProductHandler(repo).handle(retired.id)


class TestListCategories:

    def test_distinct_sorted_active_only(self):
        assert ListCategoriesHandler(_repo()).handle() == ["Books", "Misc"]
