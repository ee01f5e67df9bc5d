"""CLI commands for the Product entity."""

from __future__ import annotations

import click

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import NewProductSpec
from catalog.application.search_products import SearchProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import (
    UNSET,
    ProductChanges,
    SearchCriteria,
    SortField,
    SortOrder,
)
from catalog.infrastructure.bootstrap import product_repository


def _display_product(product: Product) -> None:
    click.echo(f"Product {product.id}")
    click.echo(f"  Name:        {product.name}")
    click.echo(f"  Category:    {product.category}")
    click.echo(f"  Price:       {product.price:.2f}")
    click.echo(f"  Stock:       {product.stock}")
    if product.description:
        click.echo(f"  Description: {product.description}")
    if product.image_url:
        click.echo(f"  Image:       {product.image_url}")
    click.echo(f"  Created:     {product.created_at.isoformat()}")
    click.echo(f"  Updated:     {product.updated_at.isoformat()}")


@click.command("list")
@click.option("--category", default=None, help="Category substring filter.")
@click.option("--search", "text", default=None, help="Search in name and description.")
@click.option("--min-price", type=click.FloatRange(min=0), default=None)
@click.option("--max-price", type=click.FloatRange(min=0), default=None)
@click.option(
    "--sort-by",
    type=click.Choice([f.value for f in SortField]),
    default=None,
    help="Field to order by.",
)
@click.option(
    "--sort-order",
    type=click.Choice([o.value for o in SortOrder]),
    default=SortOrder.ASC.value,
    show_default=True,
)
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True)
@click.option("--limit", type=click.IntRange(1, 100), default=10, show_default=True)
def product_list(
    category: str | None,
    text: str | None,
    min_price: float | None,
    max_price: float | None,
    sort_by: str | None,
    sort_order: str,
    page: int,
    limit: int,
) -> None:
    """List active products in the catalog."""
    criteria = SearchCriteria(
        category=category,
        min_price=min_price,
        max_price=max_price,
        text=text,
        sort_by=SortField(sort_by) if sort_by else None,
        sort_order=SortOrder(sort_order),
    )
    result = SearchProductsHandler(product_repo=product_repository()).handle(
        criteria, page=page, page_size=limit
    )

    if not result.items:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<32} {'Category':<16} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 104)
    for p in result.items:
        click.echo(
            f"{p.id:<36}  {p.name[:32]:<32} {p.category[:16]:<16} {p.price:>10.2f} {p.stock:>6}"
        )
    info = result.info
    click.echo()
    click.echo(
        f"Page {info.current_page} of {info.total_pages} ({info.total_items} products)"
    )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a single product."""
    handler = ShowProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(product)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", type=float, required=True, help="Price (e.g. 15.00).")
@click.option("--category", required=True, help="Product category.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--stock", type=int, default=0, show_default=True)
@click.option("--image-url", default="", help="Absolute URL of the product image.")
def product_add(
    name: str,
    price: float,
    category: str,
    description: str,
    stock: int,
    image_url: str,
) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(product_repo=product_repository())
    spec = NewProductSpec(
        name=name.strip(),
        price=price,
        category=category.strip(),
        description=description.strip(),
        stock=stock,
        image_url=image_url.strip(),
    )

    try:
        product = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price:.2f}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None)
@click.option("--price", type=float, default=None)
@click.option("--category", default=None)
@click.option("--description", default=None)
@click.option("--stock", type=int, default=None)
@click.option("--image-url", default=None)
def product_update(product_id: str, **fields) -> None:
    """Update the given fields of a product; others are left untouched."""
    changes = ProductChanges(
        **{name: value if value is not None else UNSET for name, value in fields.items()}
    )
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} updated")
    _display_product(product)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Deactivate a product (it stays in storage)."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted")
