"""Application service: Update Product use case.

Partial update: only the fields present in ProductChanges are touched.
The proposed state is validated before it is committed, so a rejected
update leaves the stored product exactly as it was.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductChanges
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, changes: ProductChanges) -> Product:
        with self._product_repo.write_lock():
            product = self._product_repo.get(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            violations = product.with_changes(changes).validate()
            if violations:
                raise ValidationError(violations)

            product.apply_update(changes)
            self._product_repo.save(product)

        logger.info(
            "Updated product %s (fields: %s)",
            product_id,
            ", ".join(changes.provided()) or "none",
        )
        return product
