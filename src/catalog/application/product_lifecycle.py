"""Application service: product create, update and delete.

Keeps three things consistent: the product record, the objects stored
under the product's image namespace, and the record's ``image_url``.
There is no transaction spanning the record store and the asset store,
so each use case runs its steps in a fixed order and awaits every call
before starting the next.

Record-store failures propagate to the caller. Asset-store failures are
logged and returned as warnings: a product is never rolled back or left
half-deleted because its image could not be handled.
"""

from __future__ import annotations

import logging
from typing import Any

from catalog.application.cleanup import CleanupScheduler
from catalog.application.dto import MutationResult
from catalog.application.lookup import require_product
from catalog.domain.exceptions import AssetStoreError, EmptyPayload
from catalog.domain.model.actor import Actor
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ImageUpload
from catalog.domain.repository.asset_store import AssetStore
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.authorization import Action, AuthorizationGuard

logger = logging.getLogger(__name__)


class ProductLifecycleManager:

    def __init__(
        self,
        product_repo: ProductRepository,
        asset_store: AssetStore,
        guard: AuthorizationGuard,
        cleanup: CleanupScheduler,
    ) -> None:
        self._product_repo = product_repo
        self._asset_store = asset_store
        self._guard = guard
        self._cleanup = cleanup

    async def create(
        self,
        actor: Actor | None,
        fields: dict[str, Any],
        image: ImageUpload | None = None,
    ) -> MutationResult:
        """Create a product, then attach its image if one was sent.

        Steps:
        1. Reject an empty payload.
        2. Persist the record without an image (the id is assigned here).
        3. Upload the image under the new id and store its URL.
        """
        self._guard.authorize(actor, Action.CREATE_PRODUCT)
        if not fields:
            raise EmptyPayload("Product is an empty object")

        product = await self._product_repo.create(Product.from_fields(fields))
        logger.info("Product %s created", product.id)

        warnings: list[str] = []
        if image is not None:
            product, warning = await self._upload(product, image)
            if warning:
                warnings.append(warning)
        return MutationResult(product=product, warnings=warnings)

    async def update(
        self,
        actor: Actor | None,
        product_id: str,
        patch: dict[str, Any],
        image: ImageUpload | None = None,
    ) -> MutationResult:
        """Apply ``patch`` and optionally replace the image.

        The old namespace is emptied *before* the new image is uploaded, so
        an object under a different filename can never outlive the
        replacement. If the upload then fails, the product is left without
        an image and ``image_url`` is cleared to say so.
        """
        self._guard.authorize(actor, Action.UPDATE_PRODUCT)
        if not patch and image is None:
            raise EmptyPayload("Please provide fields or an image to update")

        product = await require_product(self._product_repo, product_id)
        if patch:
            product.apply(patch)
            product = await self._product_repo.replace(product)
            logger.info("Product %s updated: %s", product.id, ", ".join(sorted(patch)))

        warnings: list[str] = []
        if image is not None:
            await self._cleanup.purge(product_id)
            product, warning = await self._upload(product, image)
            if warning:
                warnings.append(warning)
                if product.image_url is not None:
                    product.detach_image()
                    product = await self._product_repo.replace(product)
        return MutationResult(product=product, warnings=warnings)

    async def delete(self, actor: Actor | None, product_id: str) -> Product:
        """Delete a product and return its last known state.

        The image namespace is removed by a detached cleanup task; the
        record is deleted without waiting for it.
        """
        self._guard.authorize(actor, Action.DELETE_PRODUCT)
        product = await require_product(self._product_repo, product_id)

        self._cleanup.schedule(product_id)
        await self._product_repo.delete(product_id)
        logger.info("Product %s deleted", product.id)
        return product

    # --- Image handling -------------------------------------------------------

    async def _upload(self, product: Product, image: ImageUpload) -> tuple[Product, str | None]:
        """Store ``image`` under the product's namespace and record its URL.

        Returns the (possibly re-persisted) product and a warning message if
        the asset store failed. Record-store errors are not caught.
        """
        namespace: str = product.id  # type: ignore[assignment]
        try:
            locator = await self._asset_store.put(namespace, image.filename, image.content)
        except AssetStoreError as exc:
            logger.warning("Image upload for product %s failed: %s", namespace, exc)
            return product, f"Image '{image.filename}' was not saved: {exc}"

        try:
            url = await self._asset_store.resolve_url(locator)
        except AssetStoreError as exc:
            # The namespace must not hold an object the record does not point to.
            logger.warning("Image URL for product %s unavailable: %s", namespace, exc)
            await self._cleanup.purge(namespace)
            return product, f"Image '{image.filename}' was not saved: {exc}"

        product.attach_image(url)
        product = await self._product_repo.replace(product)
        logger.info("Product %s image set to %s", product.id, locator.key)
        return product, None
