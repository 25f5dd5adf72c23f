"""CLI commands for likes and comments."""

from __future__ import annotations

import click

from catalog.infrastructure.cli.support import echo_json, resolve_actor, run, with_actor
from catalog.infrastructure.http_contract import comments_body, likes_body


@click.command("like")
@click.argument("product_id")
@with_actor
def social_like(product_id: str, actor_id: str | None, actor_name: str | None) -> None:
    """Like a product."""
    actor = resolve_actor(actor_id, actor_name)
    product = run(lambda c: c.social.add_like(actor, product_id))
    echo_json(likes_body(product))


@click.command("unlike")
@click.argument("product_id")
@with_actor
def social_unlike(product_id: str, actor_id: str | None, actor_name: str | None) -> None:
    """Remove your like from a product."""
    actor = resolve_actor(actor_id, actor_name)
    product = run(lambda c: c.social.remove_like(actor, product_id))
    echo_json(likes_body(product))


@click.command("comment")
@click.argument("product_id")
@click.option("--text", required=True, help="Comment text.")
@with_actor
def social_comment(product_id: str, text: str, actor_id: str | None, actor_name: str | None) -> None:
    """Comment on a product."""
    actor = resolve_actor(actor_id, actor_name)
    product = run(lambda c: c.social.add_comment(actor, product_id, text))
    echo_json(comments_body(product))


@click.command("uncomment")
@click.argument("product_id")
@click.argument("comment_id")
@with_actor
def social_uncomment(
    product_id: str, comment_id: str, actor_id: str | None, actor_name: str | None
) -> None:
    """Delete one of your comments."""
    actor = resolve_actor(actor_id, actor_name)
    product = run(lambda c: c.social.remove_comment(actor, product_id, comment_id))
    echo_json(comments_body(product))
