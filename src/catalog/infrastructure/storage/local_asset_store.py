"""Filesystem-backed implementation of AssetStore.

Each namespace is a directory under ``root``. URLs are either file URIs
or, when ``base_url`` is configured, ``<base_url>/<namespace>/<filename>``
for a static file server publishing ``root``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from urllib.parse import quote

from catalog.domain.exceptions import ObjectNotFound, StoreUnavailable
from catalog.domain.model.value_objects import ObjectLocator
from catalog.domain.repository.asset_store import AssetStore


class LocalAssetStore(AssetStore):

    def __init__(self, root: Path, base_url: str | None = None) -> None:
        self._root = root
        self._base_url = base_url.rstrip("/") if base_url else None
        self._root.mkdir(parents=True, exist_ok=True)

    # --- AssetStore interface -------------------------------------------------

    async def put(self, namespace: str, filename: str, data: bytes) -> ObjectLocator:
        locator = ObjectLocator(namespace=namespace, filename=filename)
        path = self._path(locator)
        try:
            await asyncio.to_thread(self._write, path, data)
        except OSError as exc:
            raise StoreUnavailable(f"Could not store {locator.key}: {exc}") from exc
        return locator

    async def resolve_url(self, locator: ObjectLocator) -> str:
        path = self._path(locator)
        if not await asyncio.to_thread(path.is_file):
            raise ObjectNotFound(locator.key)
        if self._base_url:
            return f"{self._base_url}/{quote(locator.namespace)}/{quote(locator.filename)}"
        return path.resolve().as_uri()

    async def list_namespace(self, namespace: str) -> list[ObjectLocator]:
        directory = self._namespace_dir(namespace)
        try:
            names = await asyncio.to_thread(self._list, directory)
        except OSError as exc:
            raise StoreUnavailable(f"Could not list {namespace}: {exc}") from exc
        return [ObjectLocator(namespace=namespace, filename=name) for name in names]

    async def delete_object(self, locator: ObjectLocator) -> None:
        path = self._path(locator)
        try:
            await asyncio.to_thread(path.unlink, missing_ok=True)
        except OSError as exc:
            raise StoreUnavailable(f"Could not delete {locator.key}: {exc}") from exc

    async def delete_namespace(self, namespace: str) -> None:
        await super().delete_namespace(namespace)
        directory = self._namespace_dir(namespace)
        try:
            await asyncio.to_thread(directory.rmdir)
        except OSError:
            # Missing, or something was written into it meanwhile.
            pass

    # --- Filesystem helpers ---------------------------------------------------

    def _namespace_dir(self, namespace: str) -> Path:
        directory = self._root / namespace
        if directory.parent != self._root or namespace in ("", ".", ".."):
            raise StoreUnavailable(f"Invalid namespace: {namespace!r}")
        return directory

    def _path(self, locator: ObjectLocator) -> Path:
        path = self._namespace_dir(locator.namespace) / locator.filename
        if path.parent.parent != self._root or locator.filename in ("", ".", ".."):
            raise StoreUnavailable(f"Invalid object key: {locator.key!r}")
        return path

    @staticmethod
    def _write(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    @staticmethod
    def _list(directory: Path) -> list[str]:
        if not directory.is_dir():
            return []
        return sorted(p.name for p in directory.iterdir() if p.is_file())
