"""Application service: Show Product use cases (queries)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.application.lookup import require_product
from catalog.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, product_id: str) -> ProductDTO:
        product = await require_product(self._product_repo, product_id)
        return ProductDTO.from_product(product)

    async def list_all(self) -> list[ProductDTO]:
        return [ProductDTO.from_product(p) for p in await self._product_repo.list_all()]
