"""Tests for the catalog queries and the CleanupScheduler."""

import asyncio
import logging

import pytest

from catalog.application.cleanup import CleanupScheduler
from catalog.application.show_product import ShowProductHandler
from catalog.domain.exceptions import InvalidId, ProductNotFound
from catalog.domain.model.product import Product
from tests.fakes import FakeAssetStore, FakeProductRepository


class TestShowProduct:

    @pytest.mark.asyncio
    async def test_list_all(self):
        repo = FakeProductRepository([
            Product.from_fields({"name": "Chair", "price": 10}),
            Product.from_fields({"name": "Table"}),
        ])
        dtos = await ShowProductHandler(repo).list_all()
        assert sorted(d.name for d in dtos) == ["Chair", "Table"]
        assert {d.price for d in dtos} == {"10.00", None}

    @pytest.mark.asyncio
    async def test_show_one(self):
        chair = Product.from_fields({"name": "Chair", "quantity": 2})
        repo = FakeProductRepository([chair])
        dto = await ShowProductHandler(repo).handle(chair.id)
        assert dto.id == chair.id
        assert dto.quantity == 2
        assert dto.to_dict()["likes"] == []

    @pytest.mark.asyncio
    async def test_missing_and_malformed(self):
        handler = ShowProductHandler(FakeProductRepository())
        with pytest.raises(ProductNotFound):
            await handler.handle("e" * 24)
        with pytest.raises(InvalidId):
            await handler.handle("nope")


class TestCleanupScheduler:

    @pytest.mark.asyncio
    async def test_purge_empty_namespace_is_success(self):
        assert await CleanupScheduler(FakeAssetStore()).purge("ns") is True

    @pytest.mark.asyncio
    async def test_purge_reports_leftovers(self, caplog):
        store = FakeAssetStore()
        store.objects = {"ns/a.png": b"a", "ns/b.png": b"b", "other/c.png": b"c"}
        store.fail_delete = {"ns/a.png"}

        with caplog.at_level(logging.WARNING, logger="catalog"):
            assert await CleanupScheduler(store).purge("ns") is False

        assert store.objects == {"ns/a.png": b"a", "other/c.png": b"c"}
        assert "ns/a.png" in caplog.text

    @pytest.mark.asyncio
    async def test_schedule_runs_detached(self):
        store = FakeAssetStore()
        store.objects = {"ns/a.png": b"a"}
        scheduler = CleanupScheduler(store)

        task = scheduler.schedule("ns")
        assert scheduler.pending == 1
        assert "ns/a.png" in store.objects

        await scheduler.drain()
        assert task.result() is True
        assert scheduler.pending == 0
        assert store.objects == {}

    @pytest.mark.asyncio
    async def test_drain_without_tasks(self):
        await asyncio.wait_for(CleanupScheduler(FakeAssetStore()).drain(), timeout=1)
