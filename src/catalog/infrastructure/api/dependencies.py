"""FastAPI dependency providers."""

from __future__ import annotations

from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.bootstrap import shared_product_repository


def get_product_repository() -> ProductRepository:
    return shared_product_repository()
