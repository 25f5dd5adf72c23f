"""Application service: likes and comments on a product.

The list rules live on the Product aggregate; this service checks the
actor, loads the product, applies the rule and persists the whole record.
Two concurrent requests for the same product can interleave between the
load and the save; nothing here serializes them.
"""

from __future__ import annotations

from catalog.application.lookup import require_product
from catalog.domain.exceptions import EmptyText
from catalog.domain.model.actor import Actor
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.authorization import Action, AuthorizationGuard


class SocialManager:

    def __init__(self, product_repo: ProductRepository, guard: AuthorizationGuard) -> None:
        self._product_repo = product_repo
        self._guard = guard

    async def add_like(self, actor: Actor | None, product_id: str) -> Product:
        actor = self._guard.authorize(actor, Action.LIKE)
        product = await require_product(self._product_repo, product_id)
        product.add_like(actor.actor_id)
        return await self._product_repo.replace(product)

    async def remove_like(self, actor: Actor | None, product_id: str) -> Product:
        actor = self._guard.authorize(actor, Action.UNLIKE)
        product = await require_product(self._product_repo, product_id)
        product.remove_like(actor.actor_id)
        return await self._product_repo.replace(product)

    async def add_comment(self, actor: Actor | None, product_id: str, text: str) -> Product:
        actor = self._guard.authorize(actor, Action.COMMENT)
        if not text or not text.strip():
            raise EmptyText()

        product = await require_product(self._product_repo, product_id)
        product.add_comment(text, actor.actor_id, actor.display_name)
        return await self._product_repo.replace(product)

    async def remove_comment(
        self,
        actor: Actor | None,
        product_id: str,
        comment_id: str,
    ) -> Product:
        """Remove one comment; only its author may do so."""
        actor = self._guard.authenticate(actor)
        product = await require_product(self._product_repo, product_id)

        comment = product.find_comment(comment_id)
        self._guard.authorize(actor, Action.UNCOMMENT, comment.author_id)

        product.remove_comment(comment_id)
        return await self._product_repo.replace(product)
