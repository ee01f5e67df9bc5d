"""Application service: List Categories use case (query)."""

from __future__ import annotations

from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.catalog_query import distinct_categories


class ListCategoriesHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[str]:
        """Sorted distinct categories among active products."""
        return distinct_categories(self._product_repo.list_active())
