"""JSON-file-backed implementation of ProductRepository.

The whole catalog is one JSON array. File access runs in a worker thread
so the event loop is never blocked, and an asyncio.Lock keeps the
read-modify-write cycles of one process from interleaving.
"""

from __future__ import annotations

import asyncio
import json
import os
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from catalog.domain.exceptions import InvalidId, ProductNotFound
from catalog.domain.model.product import Comment, Like, Product
from catalog.domain.model.value_objects import Price, Quantity, is_object_id, new_object_id
from catalog.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = asyncio.Lock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    async def create(self, product: Product) -> Product:
        async with self._lock:
            products = await asyncio.to_thread(self._load)
            product.id = new_object_id()
            while product.id in products:
                product.id = new_object_id()
            products[product.id] = product
            await asyncio.to_thread(self._persist, products)
        return product

    async def get_by_id(self, product_id: str) -> Product | None:
        _check_id(product_id)
        products = await asyncio.to_thread(self._load)
        return products.get(product_id)

    async def list_all(self) -> list[Product]:
        return list((await asyncio.to_thread(self._load)).values())

    async def replace(self, product: Product) -> Product:
        _check_id(product.id)
        async with self._lock:
            products = await asyncio.to_thread(self._load)
            if product.id not in products:
                raise ProductNotFound(product.id)  # type: ignore[arg-type]
            products[product.id] = product  # type: ignore[index]
            await asyncio.to_thread(self._persist, products)
        return product

    async def delete(self, product_id: str) -> None:
        _check_id(product_id)
        async with self._lock:
            products = await asyncio.to_thread(self._load)
            if products.pop(product_id, None) is None:
                raise ProductNotFound(product_id)
            await asyncio.to_thread(self._persist, products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: _from_record(item) for item in raw}

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [_to_record(p) for p in products.values()]
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")
        os.replace(tmp_path, self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _check_id(product_id: Any) -> None:
    if not is_object_id(product_id):
        raise InvalidId(str(product_id))


def _to_record(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": str(product.price.amount) if product.price is not None else None,
        "manufacturer": product.manufacturer,
        "category": product.category,
        "condition": product.condition,
        "quantity": product.quantity.value if product.quantity is not None else None,
        "imageUrl": product.image_url,
        "likes": [{"user": like.actor_id} for like in product.likes],
        "comments": [
            {
                "id": c.comment_id,
                "text": c.text,
                "user": c.author_id,
                "name": c.author_display_name,
                "date": c.created_at.isoformat(),
            }
            for c in product.comments
        ],
    }


def _from_record(item: dict[str, Any]) -> Product:
    return Product(
        id=item["id"],
        name=item.get("name"),
        description=item.get("description"),
        price=Price(Decimal(item["price"])) if item.get("price") is not None else None,
        manufacturer=item.get("manufacturer"),
        category=item.get("category"),
        condition=item.get("condition"),
        quantity=Quantity(item["quantity"]) if item.get("quantity") is not None else None,
        image_url=item.get("imageUrl"),
        likes=[Like(actor_id=like["user"]) for like in item.get("likes", [])],
        comments=[
            Comment(
                comment_id=c["id"],
                text=c["text"],
                author_id=c["user"],
                author_display_name=c.get("name", ""),
                created_at=datetime.fromisoformat(c["date"]),
            )
            for c in item.get("comments", [])
        ],
    )
