"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from catalog.infrastructure.config import settings
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository(data_file: Path | None = None) -> JsonProductRepository:
    """Build a repository over ``data_file`` (the configured file by default)."""
    return JsonProductRepository(data_file or settings.data_file)


@lru_cache(maxsize=1)
def shared_product_repository() -> JsonProductRepository:
    """The single process-wide repository the API server hands to requests."""
    return product_repository()
