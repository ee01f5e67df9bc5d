"""Application service: Create Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import NewProductSpec
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, spec: NewProductSpec) -> Product:
        """Add a new product to the catalog.

        Nothing is appended or written when the product is invalid.
        """
        product = Product(
            name=spec.name,
            price=spec.price,
            category=spec.category,
            description=spec.description,
            stock=spec.stock,
            image_url=spec.image_url,
        )
        violations = product.validate()
        if violations:
            raise ValidationError(violations)

        with self._product_repo.write_lock():
            self._product_repo.add(product)

        logger.info("Created product %s (%s)", product.id, product.name)
        return product
