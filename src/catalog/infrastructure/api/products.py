"""FastAPI routes for the product catalog."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.list_categories import ListCategoriesHandler
from catalog.application.search_products import SearchProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.model.value_objects import SearchCriteria, SortField, SortOrder
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.api.dependencies import get_product_repository
from catalog.infrastructure.api.schemas import (
    CategoryListResponse,
    MessageResponse,
    Pagination,
    ProductCreate,
    ProductListResponse,
    ProductOut,
    ProductResponse,
    ProductUpdate,
)
from catalog.infrastructure.config import settings

router = APIRouter(prefix="/api/products", tags=["products"])

Repository = Annotated[ProductRepository, Depends(get_product_repository)]


@router.get("", response_model=ProductListResponse)
def list_products(
    repo: Repository,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=settings.max_page_size)] = settings.default_page_size,
    category: Annotated[str | None, Query(min_length=2, max_length=50)] = None,
    min_price: Annotated[float | None, Query(alias="minPrice", ge=0)] = None,
    max_price: Annotated[float | None, Query(alias="maxPrice", ge=0)] = None,
    search: Annotated[str | None, Query(min_length=1, max_length=100)] = None,
    sort_by: Annotated[SortField | None, Query(alias="sortBy")] = None,
    sort_order: Annotated[SortOrder, Query(alias="sortOrder")] = SortOrder.ASC,
) -> ProductListResponse:
    """List active products with filtering, search, sorting and pagination."""
    criteria = SearchCriteria(
        category=category.strip() if category else None,
        min_price=min_price,
        max_price=max_price,
        text=search.strip() if search else None,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    result = SearchProductsHandler(product_repo=repo).handle(
        criteria, page=page, page_size=limit
    )
    return ProductListResponse(
        data=[ProductOut.from_domain(p) for p in result.items],
        pagination=Pagination.from_domain(result.info),
    )


@router.get("/categories", response_model=CategoryListResponse)
def list_categories(repo: Repository) -> CategoryListResponse:
    """Sorted distinct categories among active products."""
    return CategoryListResponse(data=ListCategoriesHandler(product_repo=repo).handle())


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: UUID, repo: Repository) -> ProductResponse:
    product = ShowProductHandler(product_repo=repo).handle(str(product_id))
    return ProductResponse(data=ProductOut.from_domain(product))


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(body: ProductCreate, repo: Repository) -> ProductResponse:
    product = CreateProductHandler(product_repo=repo).handle(body.to_spec())
    return ProductResponse(data=ProductOut.from_domain(product))


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: UUID, body: ProductUpdate, repo: Repository
) -> ProductResponse:
    product = UpdateProductHandler(product_repo=repo).handle(
        str(product_id), body.to_changes()
    )
    return ProductResponse(data=ProductOut.from_domain(product))


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(product_id: UUID, repo: Repository) -> MessageResponse:
    """Soft delete: the product is hidden, not removed from storage."""
    DeleteProductHandler(product_repo=repo).handle(str(product_id))
    return MessageResponse(message="Product deleted successfully")
