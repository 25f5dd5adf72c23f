"""Best-effort removal of image namespaces.

Namespace deletion never fails the mutation that asked for it. Failures
are logged here and nowhere else. ``schedule`` runs the deletion as a
detached task: the caller can answer its client before the objects are
gone, so for a short window a deleted product's image may still be
fetchable by URL. ``drain`` waits for every detached task still running.
"""

from __future__ import annotations

import asyncio
import logging

from catalog.domain.exceptions import AssetStoreError, PartialDeleteFailure
from catalog.domain.repository.asset_store import AssetStore

logger = logging.getLogger(__name__)


class CleanupScheduler:

    def __init__(self, asset_store: AssetStore) -> None:
        self._asset_store = asset_store
        self._tasks: set[asyncio.Task[bool]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def purge(self, namespace: str) -> bool:
        """Delete the namespace now; return False if anything was left behind."""
        try:
            await self._asset_store.delete_namespace(namespace)
        except PartialDeleteFailure as exc:
            logger.warning(
                "Namespace %s partially deleted; left behind: %s",
                namespace,
                ", ".join(exc.failed),
            )
            return False
        except AssetStoreError as exc:
            logger.warning("Could not delete namespace %s: %s", namespace, exc)
            return False
        logger.debug("Namespace %s deleted", namespace)
        return True

    def schedule(self, namespace: str) -> asyncio.Task[bool]:
        """Start ``purge`` in the background and return its task."""
        task = asyncio.get_running_loop().create_task(
            self.purge(namespace), name=f"purge-{namespace}"
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        while self._tasks:
            await asyncio.gather(*list(self._tasks))
