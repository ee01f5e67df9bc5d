import click

from catalog.infrastructure.cli.category_commands import category_list
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from catalog.infrastructure.cli.server_commands import serve
from catalog.infrastructure.config import settings
from catalog.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--log-level", default=settings.log_level, show_default=True)
def cli(log_level: str) -> None:
    """Product Catalog — JSON-backed product catalog service"""
    configure_logging(log_level)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def category() -> None:
    """Browse categories."""


# Register subcommands
cli.add_command(serve)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
category.add_command(category_list)
