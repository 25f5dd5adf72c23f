"""Shared lookups for the application services."""

from __future__ import annotations

from catalog.domain.exceptions import ProductNotFound
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


async def require_product(product_repo: ProductRepository, product_id: str) -> Product:
    """Fetch a product, raising ProductNotFound instead of returning None."""
    product = await product_repo.get_by_id(product_id)
    if product is None:
        raise ProductNotFound(product_id)
    return product
