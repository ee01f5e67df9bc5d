"""CLI commands for product categories."""

from __future__ import annotations

import click

from catalog.application.list_categories import ListCategoriesHandler
from catalog.infrastructure.bootstrap import product_repository


@click.command("list")
def category_list() -> None:
    """List the categories of active products."""
    categories = ListCategoriesHandler(product_repo=product_repository()).handle()

    if not categories:
        click.echo("No categories found.")
        return

    for name in categories:
        click.echo(name)
