"""Abstract client for the remote binary-object store.

Objects are addressed by ``<namespace>/<filename>``; a product's image
lives under the namespace named after the product id.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.exceptions import AssetStoreError, PartialDeleteFailure
from catalog.domain.model.value_objects import ObjectLocator


class AssetStore(ABC):

    @abstractmethod
    async def put(self, namespace: str, filename: str, data: bytes) -> ObjectLocator:
        """Store ``data`` under ``namespace/filename``, replacing any object there.

        Raises StoreUnavailable when the backing store fails.
        """

    @abstractmethod
    async def resolve_url(self, locator: ObjectLocator) -> str:
        """Return a fetchable URL. Raises ObjectNotFound for a stale locator."""

    @abstractmethod
    async def list_namespace(self, namespace: str) -> list[ObjectLocator]:
        """Return every object stored under ``namespace`` (possibly none)."""

    @abstractmethod
    async def delete_object(self, locator: ObjectLocator) -> None:
        """Delete one object; an object that is already gone counts as deleted."""

    async def delete_namespace(self, namespace: str) -> None:
        """Delete every object under ``namespace``.

        An empty namespace is a successful no-op. One failed deletion does
        not stop the others; the failures are reported together as
        PartialDeleteFailure once every object has been attempted.
        """
        failed: list[str] = []
        for locator in await self.list_namespace(namespace):
            try:
                await self.delete_object(locator)
            except AssetStoreError:
                failed.append(locator.key)
        if failed:
            raise PartialDeleteFailure(namespace, failed)
