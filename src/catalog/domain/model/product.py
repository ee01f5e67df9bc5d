"""Product entity.

The only entity in the catalog. Products are never physically removed:
deleting one flips ``is_active`` to False, which hides it from every
read path while keeping it in storage.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from urllib.parse import urlparse
from uuid import uuid4

from catalog.domain.model.value_objects import ProductChanges

NAME_MIN, NAME_MAX = 2, 100
CATEGORY_MIN, CATEGORY_MAX = 2, 50
DESCRIPTION_MAX = 500


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid4())


def is_valid_url(value: str) -> bool:
    """True for an absolute URL with a scheme and a host."""
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


@dataclass
class Product:
    """A product in the catalog.

    Construction performs no validation: an invalid product can exist in
    memory, but ``validate()`` must come back empty before it is persisted.
    """

    name: str
    price: float | None
    category: str
    description: str = ""
    stock: int = 0
    image_url: str = ""
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime | None = None
    is_active: bool = True

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at

    # --- Mutation -------------------------------------------------------------

    def apply_update(self, changes: ProductChanges) -> None:
        """Overwrite the explicitly supplied fields and refresh updated_at.

        The timestamp moves even when no value actually changed.
        """
        for name, value in changes.provided().items():
            setattr(self, name, value)
        self.touch()

    def with_changes(self, changes: ProductChanges) -> Product:
        """Return a copy with ``changes`` applied, leaving self untouched."""
        proposed = dataclasses.replace(self)
        proposed.apply_update(changes)
        return proposed

    def deactivate(self) -> None:
        self.is_active = False
        self.touch()

    def touch(self) -> None:
        # never let a clock step backwards move updated_at into the past
        self.updated_at = max(utcnow(), self.updated_at or self.created_at)

    # --- Validation -----------------------------------------------------------

    def validate(self) -> list[str]:
        """Return every violated constraint; an empty list means valid."""
        violations: list[str] = []

        name = (self.name or "").strip()
        if len(name) < NAME_MIN:
            violations.append(f"Name must be at least {NAME_MIN} characters long")
        elif len(name) > NAME_MAX:
            violations.append(f"Name must be at most {NAME_MAX} characters long")

        if len(self.description or "") > DESCRIPTION_MAX:
            violations.append(
                f"Description cannot exceed {DESCRIPTION_MAX} characters"
            )

        if self.price is None or not math.isfinite(self.price) or self.price < 0:
            violations.append("Price must be a non-negative number")

        category = (self.category or "").strip()
        if len(category) < CATEGORY_MIN:
            violations.append(
                f"Category must be at least {CATEGORY_MIN} characters long"
            )
        elif len(category) > CATEGORY_MAX:
            violations.append(
                f"Category must be at most {CATEGORY_MAX} characters long"
            )

        if self.stock is None or self.stock < 0:
            violations.append("Stock cannot be negative")

        if self.image_url and not is_valid_url(self.image_url):
            violations.append("Image URL must be a valid URL")

        return violations
