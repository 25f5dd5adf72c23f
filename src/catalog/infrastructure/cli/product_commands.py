"""CLI commands for the Product aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from catalog.infrastructure.cli.support import (
    echo_json,
    echo_warnings,
    load_image,
    parse_fields,
    resolve_actor,
    run,
    with_actor,
)
from catalog.infrastructure.http_contract import delete_body, product_body

_image_option = click.option(
    "--image",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Image file (.jpg, .jpeg or .png).",
)
_field_option = click.option(
    "-f", "--field", "fields", multiple=True, help="Field as 'key=value' (repeatable)."
)


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = run(lambda c: c.queries.list_all())

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<26} {'Name':<20} {'Price':>10} {'Likes':>6}")
    click.echo("-" * 65)
    for p in products:
        click.echo(f"{p.id:<26} {p.name or '':<20} {p.price or '':>10} {len(p.likes):>6}")


@click.command("show")
@click.argument("product_id")
def product_show(product_id: str) -> None:
    """Show one product as JSON."""
    dto = run(lambda c: c.queries.handle(product_id))
    echo_json(dto.to_dict())


@click.command("create")
@_field_option
@_image_option
@with_actor
def product_create(
    fields: tuple[str, ...], image: Path | None, actor_id: str | None, actor_name: str | None
) -> None:
    """Create a product, optionally with an image."""
    actor = resolve_actor(actor_id, actor_name)
    values = parse_fields(fields)

    result = run(lambda c: c.lifecycle.create(actor, values, load_image(image)))

    echo_warnings(result.warnings)
    echo_json(product_body(result.product))


@click.command("update")
@click.argument("product_id")
@_field_option
@_image_option
@with_actor
def product_update(
    product_id: str,
    fields: tuple[str, ...],
    image: Path | None,
    actor_id: str | None,
    actor_name: str | None,
) -> None:
    """Update product fields and/or replace its image."""
    actor = resolve_actor(actor_id, actor_name)
    patch = parse_fields(fields)

    result = run(lambda c: c.lifecycle.update(actor, product_id, patch, load_image(image)))

    echo_warnings(result.warnings)
    echo_json(product_body(result.product))


@click.command("delete")
@click.argument("product_id")
@with_actor
def product_delete(product_id: str, actor_id: str | None, actor_name: str | None) -> None:
    """Delete a product and its image."""
    actor = resolve_actor(actor_id, actor_name)
    product = run(lambda c: c.lifecycle.delete(actor, product_id))
    echo_json(delete_body(product))
