"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Store clients are built
once per process and injected into every service.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.application.cleanup import CleanupScheduler
from catalog.application.product_lifecycle import ProductLifecycleManager
from catalog.application.show_product import ShowProductHandler
from catalog.application.social import SocialManager
from catalog.domain.repository.asset_store import AssetStore
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.authorization import AuthorizationGuard
from catalog.infrastructure.config import Settings
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.storage.local_asset_store import LocalAssetStore


@dataclass
class Container:
    product_repo: ProductRepository
    asset_store: AssetStore
    cleanup: CleanupScheduler
    lifecycle: ProductLifecycleManager
    social: SocialManager
    queries: ShowProductHandler


def build_container(
    product_repo: ProductRepository,
    asset_store: AssetStore,
    guard: AuthorizationGuard | None = None,
) -> Container:
    guard = guard or AuthorizationGuard()
    cleanup = CleanupScheduler(asset_store)
    return Container(
        product_repo=product_repo,
        asset_store=asset_store,
        cleanup=cleanup,
        lifecycle=ProductLifecycleManager(product_repo, asset_store, guard, cleanup),
        social=SocialManager(product_repo, guard),
        queries=ShowProductHandler(product_repo),
    )


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.products_file)


def asset_store(settings: Settings) -> LocalAssetStore:
    return LocalAssetStore(settings.asset_dir, settings.asset_base_url)


def container(settings: Settings) -> Container:
    return build_container(product_repository(settings), asset_store(settings))
