"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _Unset:
    """Marker for a field that was not supplied at all."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class ProductChanges:
    """A partial update for a Product.

    Each field is either an explicit new value or UNSET. ``None`` is never
    used to mean "absent", so a caller can tell "leave it alone" apart from
    any real value.
    """

    name: str = UNSET
    description: str = UNSET
    price: float = UNSET
    category: str = UNSET
    stock: int = UNSET
    image_url: str = UNSET
    is_active: bool = UNSET

    def provided(self) -> dict[str, Any]:
        """Return only the fields that were explicitly supplied."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }


class SortField(str, Enum):
    """Fields a product listing can be ordered by (wire names)."""

    NAME = "name"
    PRICE = "price"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    @property
    def attribute(self) -> str:
        return {
            SortField.NAME: "name",
            SortField.PRICE: "price",
            SortField.CREATED_AT: "created_at",
            SortField.UPDATED_AT: "updated_at",
        }[self]


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SearchCriteria:
    """Filters for a product search. Every filter is optional; set filters
    are combined with logical AND."""

    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    text: str | None = None
    sort_by: SortField | None = None
    sort_order: SortOrder = SortOrder.ASC


@dataclass(frozen=True)
class PageInfo:
    """Pagination metadata for a single page of results."""

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    info: PageInfo
