"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repository and
the filesystem asset store but keep everything in dicts. Records are
deep-copied on the way in and out, like a real store would serialize
them, and the asset store can be told to fail.
"""

from __future__ import annotations

import copy

from catalog.domain.exceptions import InvalidId, ObjectNotFound, ProductNotFound, StoreUnavailable
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ObjectLocator, is_object_id, new_object_id
from catalog.domain.repository.asset_store import AssetStore
from catalog.domain.repository.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        self.writes = 0
        for p in products or []:
            if p.id is None:
                p.id = new_object_id()
            self._store[p.id] = copy.deepcopy(p)

    async def create(self, product: Product) -> Product:
        product.id = new_object_id()
        self._store[product.id] = copy.deepcopy(product)
        self.writes += 1
        return product

    async def get_by_id(self, product_id: str) -> Product | None:
        self._check(product_id)
        product = self._store.get(product_id)
        return copy.deepcopy(product)

    async def list_all(self) -> list[Product]:
        return [copy.deepcopy(p) for p in self._store.values()]

    async def replace(self, product: Product) -> Product:
        self._check(product.id)
        if product.id not in self._store:
            raise ProductNotFound(product.id)
        self._store[product.id] = copy.deepcopy(product)
        self.writes += 1
        return product

    async def delete(self, product_id: str) -> None:
        self._check(product_id)
        if self._store.pop(product_id, None) is None:
            raise ProductNotFound(product_id)
        self.writes += 1

    @staticmethod
    def _check(product_id) -> None:
        if not is_object_id(product_id):
            raise InvalidId(str(product_id))


class FakeAssetStore(AssetStore):

    BASE_URL = "https://assets.test"

    def __init__(self) -> None:
        self.objects: dict[str, bytes] = {}
        self.fail_put = False
        self.fail_list = False
        self.fail_resolve = False
        self.fail_delete: set[str] = set()
        self.calls: list[str] = []

    def keys(self, namespace: str) -> list[str]:
        return sorted(k for k in self.objects if k.startswith(f"{namespace}/"))

    async def put(self, namespace: str, filename: str, data: bytes) -> ObjectLocator:
        self.calls.append(f"put {namespace}/{filename}")
        if self.fail_put:
            raise StoreUnavailable("upload refused")
        locator = ObjectLocator(namespace, filename)
        self.objects[locator.key] = data
        return locator

    async def resolve_url(self, locator: ObjectLocator) -> str:
        if self.fail_resolve:
            raise ObjectNotFound(locator.key)
        if locator.key not in self.objects:
            raise ObjectNotFound(locator.key)
        return f"{self.BASE_URL}/{locator.key}"

    async def list_namespace(self, namespace: str) -> list[ObjectLocator]:
        self.calls.append(f"list {namespace}")
        if self.fail_list:
            raise StoreUnavailable("listing refused")
        return [ObjectLocator(*key.split("/", 1)) for key in self.keys(namespace)]

    async def delete_object(self, locator: ObjectLocator) -> None:
        self.calls.append(f"delete {locator.key}")
        if locator.key in self.fail_delete:
            raise StoreUnavailable(f"cannot delete {locator.key}")
        self.objects.pop(locator.key, None)
