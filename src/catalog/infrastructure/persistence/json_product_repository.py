"""JSON-file-backed implementation of ProductRepository.

The whole catalog lives in memory and the file is rewritten in full
after every successful mutation. Inactive (soft-deleted) products are
written too.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager
from datetime import datetime, timezone
from pathlib import Path

from catalog.domain.exceptions import StorageError
from catalog.domain.model.product import Product, utcnow
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.sample_data import sample_products

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(
        self,
        file_path: Path,
        seed: Callable[[], list[Product]] = sample_products,
    ) -> None:
        self._file_path = file_path
        self._seed = seed
        self._products: list[Product] = []
        self._lock = threading.RLock()
        self.initialize()

    # --- Lifecycle ------------------------------------------------------------

    def initialize(self) -> None:
        """Load the catalog file, falling back to the seed catalogue.

        A missing file and an unreadable one are handled the same way
        (seed and persist); only the log line tells them apart.
        """
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            products = [self._to_domain(item) for item in raw]
        except FileNotFoundError:
            logger.warning(
                "Catalog file %s not found, seeding sample products",
                self._file_path,
            )
            self._reseed()
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.warning(
                "Catalog file %s could not be loaded (%s), seeding sample products",
                self._file_path,
                exc,
            )
            self._reseed()
        else:
            self._products = products
            logger.info("Loaded %d products from %s", len(products), self._file_path)

    def persist(self) -> None:
        """Overwrite the catalog file with every product in memory."""
        raw = [self._to_raw(p) for p in self._products]
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(raw, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            logger.error("Failed to write catalog file %s: %s", self._file_path, exc)
            raise StorageError("Could not save products") from exc

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        return list(self._products)

    def list_active(self) -> list[Product]:
        return [p for p in self._products if p.is_active]

    def get(self, product_id: str) -> Product | None:
        for product in self._products:
            if product.id == product_id and product.is_active:
                return product
        return None

    def add(self, product: Product) -> None:
        self._products.append(product)
        try:
            self.persist()
        except StorageError:
            self._products.pop()
            raise

    def save(self, product: Product) -> None:
        self.persist()

    def write_lock(self) -> AbstractContextManager:
        return self._lock

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": product.price,
            "category": product.category,
            "stock": product.stock,
            "imageUrl": product.image_url,
            "createdAt": format_timestamp(product.created_at),
            "updatedAt": format_timestamp(product.updated_at),
            "isActive": product.is_active,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        created_at = parse_timestamp(raw.get("createdAt")) or utcnow()
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description") or "",
            price=float(raw["price"]),
            category=raw["category"],
            stock=raw.get("stock") or 0,
            image_url=raw.get("imageUrl") or "",
            created_at=created_at,
            updated_at=parse_timestamp(raw.get("updatedAt")) or created_at,
            is_active=raw.get("isActive", True),
        )

    def _reseed(self) -> None:
        self._products = self._seed()
        self.persist()


def format_timestamp(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


def parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
