"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.

Every method raises InvalidId when given an id that the backing store
could never have issued.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Persist a new product, assign its id and return it."""

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    async def replace(self, product: Product) -> Product:
        """Overwrite the stored record with the full state of ``product``.

        Raises ProductNotFound if the record no longer exists.
        """

    @abstractmethod
    async def delete(self, product_id: str) -> None:
        """Remove a product. Raises ProductNotFound if absent."""
