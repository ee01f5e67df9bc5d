"""Request/response schemas for the HTTP API.

These models are the validation gate: malformed bodies and parameters
are rejected with 422 before anything reaches the application layer.
Wire names are camelCase (``imageUrl``, ``isActive``...).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from catalog.application.dto import NewProductSpec
from catalog.domain.model.product import (
    CATEGORY_MAX,
    CATEGORY_MIN,
    DESCRIPTION_MAX,
    NAME_MAX,
    NAME_MIN,
    Product,
    is_valid_url,
)
from catalog.domain.model.value_objects import PageInfo, ProductChanges


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _check_image_url(value: str | None) -> str | None:
    if value and value.strip() and not is_valid_url(value.strip()):
        raise ValueError("Image URL must be a valid URL")
    return value.strip() if value else value


# --- Requests -----------------------------------------------------------------


class ProductCreate(CamelModel):
    """Body of POST /api/products."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=NAME_MIN, max_length=NAME_MAX)
    description: str = Field(default="", max_length=DESCRIPTION_MAX)
    price: float = Field(ge=0, allow_inf_nan=False)
    category: str = Field(min_length=CATEGORY_MIN, max_length=CATEGORY_MAX)
    stock: int = Field(default=0, ge=0)
    image_url: str = ""

    check_image_url = field_validator("image_url")(_check_image_url)

    def to_spec(self) -> NewProductSpec:
        return NewProductSpec(
            name=self.name,
            price=self.price,
            category=self.category,
            description=self.description,
            stock=self.stock,
            image_url=self.image_url,
        )


class ProductUpdate(CamelModel):
    """Body of PUT /api/products/{id}.

    Every field is optional. Only the keys actually present in the body
    end up in the resulting ProductChanges; an explicit ``null`` is
    rejected rather than treated as "absent".
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(default=None, min_length=NAME_MIN, max_length=NAME_MAX)
    description: str = Field(default=None, max_length=DESCRIPTION_MAX)
    price: float = Field(default=None, ge=0, allow_inf_nan=False)
    category: str = Field(default=None, min_length=CATEGORY_MIN, max_length=CATEGORY_MAX)
    stock: int = Field(default=None, ge=0)
    image_url: str = None
    is_active: bool = None

    check_image_url = field_validator("image_url")(_check_image_url)

    def to_changes(self) -> ProductChanges:
        return ProductChanges(
            **{name: getattr(self, name) for name in self.model_fields_set}
        )


# --- Responses ----------------------------------------------------------------


class ProductOut(CamelModel):
    id: str
    name: str
    description: str
    price: float
    category: str
    stock: int
    image_url: str
    created_at: datetime
    updated_at: datetime
    is_active: bool

    @classmethod
    def from_domain(cls, product: Product) -> ProductOut:
        return cls.model_validate(product)


class Pagination(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def from_domain(cls, info: PageInfo) -> Pagination:
        return cls.model_validate(info)


class ProductResponse(BaseModel):
    status: str = "success"
    data: ProductOut


class ProductListResponse(BaseModel):
    status: str = "success"
    data: list[ProductOut]
    pagination: Pagination


class CategoryListResponse(BaseModel):
    status: str = "success"
    data: list[str]


class MessageResponse(BaseModel):
    status: str = "success"
    message: str
