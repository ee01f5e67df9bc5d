"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live
elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product, inactive ones included, in insertion order."""

    @abstractmethod
    def list_active(self) -> list[Product]:
        """Return the active products in insertion order."""

    @abstractmethod
    def get(self, product_id: str) -> Product | None:
        """Return the active product with this ID, or None."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Append a new product and persist the collection."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a product that was changed in place."""

    @abstractmethod
    def write_lock(self) -> AbstractContextManager:
        """Guard a read-modify-persist sequence against concurrent writers."""
