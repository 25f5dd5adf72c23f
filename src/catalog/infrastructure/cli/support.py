"""Helpers shared by the CLI commands."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Awaitable, Callable, TypeVar

import click

from catalog.domain.exceptions import CatalogError
from catalog.domain.model.actor import Actor
from catalog.domain.model.value_objects import ImageUpload
from catalog.infrastructure import bootstrap
from catalog.infrastructure.config import Settings
from catalog.infrastructure.http_contract import error_body, status_for

T = TypeVar("T")

actor_options = [
    click.option("--actor-id", default=None, help="Acting user id (default: $CATALOG_ACTOR_ID)."),
    click.option("--actor-name", default=None, help="Acting user display name."),
]


def with_actor(func: Callable[..., Any]) -> Callable[..., Any]:
    for option in reversed(actor_options):
        func = option(func)
    return func


def resolve_actor(actor_id: str | None, actor_name: str | None) -> Actor | None:
    """Stand-in for the authentication layer: identity comes from flags or env."""
    settings = Settings.from_env()
    actor_id = actor_id or settings.actor_id
    if not actor_id:
        return None
    return Actor(actor_id=actor_id, display_name=actor_name or settings.actor_name)


def run(use_case: Callable[[bootstrap.Container], Awaitable[T]]) -> T:
    """Run one use case against freshly wired stores.

    Detached cleanup started by the use case is awaited before the process
    exits. Catalog errors become a ClickException carrying the status code
    an HTTP caller would have received.
    """

    async def _main() -> T:
        container = bootstrap.container(Settings.from_env())
        try:
            return await use_case(container)
        finally:
            await container.cleanup.drain()

    try:
        return asyncio.run(_main())
    except CatalogError as exc:
        body = error_body(exc)
        raise click.ClickException(f"[{status_for(exc)} {body['error']}] {body['message']}")


def parse_fields(pairs: tuple[str, ...]) -> dict[str, str]:
    """Parse ('name=Chair', 'price=10') into a dict."""
    fields: dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(f"Invalid field '{pair}'. Expected 'key=value'.")
        key, value = pair.split("=", 1)
        fields[key.strip()] = value
    return fields


def load_image(path: Path | None) -> ImageUpload | None:
    if path is None:
        return None
    return ImageUpload(filename=path.name, content=path.read_bytes())


def echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))


def echo_warnings(warnings: list[str]) -> None:
    for warning in warnings:
        click.echo(f"Warning: {warning}", err=True)
