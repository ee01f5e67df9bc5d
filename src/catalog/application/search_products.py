"""Application service: Search Products use case (query).

Filters and orders the active products, then cuts out the requested page.
"""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Page, SearchCriteria
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.catalog_query import paginate, search_products


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        criteria: SearchCriteria | None = None,
        page: int = 1,
        page_size: int = 10,
    ) -> Page[Product]:
        results = search_products(
            self._product_repo.list_active(), criteria or SearchCriteria()
        )
        return paginate(results, page, page_size)
