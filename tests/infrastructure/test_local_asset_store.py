"""Tests for the filesystem asset store (uses tmp_path)."""

import asyncio

import pytest

from catalog.domain.exceptions import ObjectNotFound, PartialDeleteFailure, StoreUnavailable
from catalog.domain.model.value_objects import ObjectLocator
from catalog.infrastructure.storage.local_asset_store import LocalAssetStore


@pytest.fixture
def store(tmp_path):
    return LocalAssetStore(tmp_path / "assets")


class TestLocalAssetStore:

    @pytest.mark.asyncio
    async def test_put_writes_under_namespace(self, store, tmp_path):
        locator = await store.put("abc", "chair.png", b"png")
        assert locator == ObjectLocator("abc", "chair.png")
        assert (tmp_path / "assets" / "abc" / "chair.png").read_bytes() == b"png"

    @pytest.mark.asyncio
    async def test_resolve_url_as_file_uri(self, store):
        locator = await store.put("abc", "chair.png", b"png")
        url = await store.resolve_url(locator)
        assert url.startswith("file://")
        assert url.endswith("/abc/chair.png")

    @pytest.mark.asyncio
    async def test_resolve_url_with_base_url(self, tmp_path):
        store = LocalAssetStore(tmp_path / "assets", "https://cdn.example/img/")
        locator = await store.put("abc", "my chair.png", b"png")
        assert await store.resolve_url(locator) == "https://cdn.example/img/abc/my%20chair.png"

    @pytest.mark.asyncio
    async def test_resolve_stale_locator(self, store):
        with pytest.raises(ObjectNotFound):
            await store.resolve_url(ObjectLocator("abc", "gone.png"))

    @pytest.mark.asyncio
    async def test_delete_namespace(self, store, tmp_path):
        await store.put("abc", "a.png", b"a")
        await store.put("abc", "b.png", b"b")
        await store.put("xyz", "c.png", b"c")

        await store.delete_namespace("abc")

        assert await store.list_namespace("abc") == []
        assert not (tmp_path / "assets" / "abc").exists()
        assert await store.list_namespace("xyz") == [ObjectLocator("xyz", "c.png")]

    @pytest.mark.asyncio
    async def test_delete_empty_namespace_is_noop(self, store):
        await store.delete_namespace("never-used")

    @pytest.mark.asyncio
    async def test_deleting_missing_object_is_success(self, store):
        await store.delete_object(ObjectLocator("abc", "gone.png"))

    @pytest.mark.asyncio
    async def test_overlapping_namespace_deletes(self, store):
        await store.put("abc", "a.png", b"a")
        await store.put("abc", "b.png", b"b")

        await asyncio.gather(store.delete_namespace("abc"), store.delete_namespace("abc"))

        assert await store.list_namespace("abc") == []

    @pytest.mark.asyncio
    async def test_delete_namespace_continues_after_failure(self, store, monkeypatch):
        await store.put("abc", "a.png", b"a")
        await store.put("abc", "b.png", b"b")

        real_delete = LocalAssetStore.delete_object

        async def flaky_delete(self, locator):
            if locator.filename == "a.png":
                raise StoreUnavailable("disk says no")
            await real_delete(self, locator)

        monkeypatch.setattr(LocalAssetStore, "delete_object", flaky_delete)

        with pytest.raises(PartialDeleteFailure) as exc_info:
            await store.delete_namespace("abc")

        assert exc_info.value.failed == ["abc/a.png"]
        assert await store.list_namespace("abc") == [ObjectLocator("abc", "a.png")]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("namespace", ["..", "a/b", ""])
    async def test_rejects_escaping_namespaces(self, store, namespace):
        with pytest.raises(StoreUnavailable):
            await store.put(namespace, "x.png", b"x")
