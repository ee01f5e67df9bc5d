"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NewProductSpec:
    """Input: the client-supplied fields of a product to create."""

    name: str
    price: float
    category: str
    description: str = ""
    stock: int = 0
    image_url: str = ""
