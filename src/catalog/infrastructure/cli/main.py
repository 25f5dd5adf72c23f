import click

from catalog.infrastructure.cli.product_commands import (
    product_create,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from catalog.infrastructure.cli.social_commands import (
    social_comment,
    social_like,
    social_uncomment,
    social_unlike,
)
from catalog.infrastructure.config import Settings
from catalog.infrastructure.logging_setup import configure_logging


@click.group()
def cli() -> None:
    """Catalog: products, likes and comments"""
    configure_logging(Settings.from_env().log_level)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def social() -> None:
    """Like and comment on products."""


# Register subcommands
product.add_command(product_create)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
social.add_command(social_comment)
social.add_command(social_like)
social.add_command(social_uncomment)
social.add_command(social_unlike)
