"""Application service: Delete Product use case (soft delete).

The product stays in storage with ``is_active`` set to False; it simply
disappears from every read path.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        with self._product_repo.write_lock():
            product = self._product_repo.get(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            product.deactivate()
            self._product_repo.save(product)

        logger.info("Deactivated product %s", product_id)
