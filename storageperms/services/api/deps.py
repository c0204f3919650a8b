# storageperms/services/api/deps.py
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from fastapi import Depends

from storageperms.common.settings import Settings, get_settings
from storageperms.database.core.main import make_engine
from storageperms.database.repos.media_index_repo import SqlAlchemyMediaIndex
from storageperms.database.repos.settings_store_repo import SqlAlchemySettingsStore
from storageperms.services.indexing.indexer import MediaIndexer
from storageperms.services.library.state_manager import StorageStateManager
from storageperms.services.permissions.registry import InMemoryPermissionRegistry


@dataclass
class AppServices:
    registry: InMemoryPermissionRegistry
    media_index: SqlAlchemyMediaIndex
    store: SqlAlchemySettingsStore
    manager: StorageStateManager
    indexer: MediaIndexer


def build_services(cfg: Settings) -> AppServices:
    """
    Wire the SQLite adapters and the in-memory permission registry into one
    StorageStateManager. Schemas are created if missing.
    """
    media_index = SqlAlchemyMediaIndex(
        make_engine(cfg.media_index_url, echo=cfg.media_index.echo),
        content_uri=cfg.library.content_uri,
    )
    media_index.create_schema()

    store = SqlAlchemySettingsStore(make_engine(cfg.preferences_url, echo=cfg.preferences.echo))
    store.create_schema()

    registry = InMemoryPermissionRegistry(auto_grant=cfg.permissions.auto_grant)
    manager = StorageStateManager.from_settings(
        cfg, oracle=registry, store=store, media_index=media_index,
    )
    return AppServices(
        registry=registry,
        media_index=media_index,
        store=store,
        manager=manager,
        indexer=MediaIndexer(media_index, cfg),
    )


@lru_cache(maxsize=1)
def get_services() -> AppServices:
    """Process-wide services (one state manager per app, like one view-model per screen)."""
    return build_services(get_settings())


def get_state_manager(services: AppServices = Depends(get_services)) -> StorageStateManager:
    return services.manager


def get_permission_registry(services: AppServices = Depends(get_services)) -> InMemoryPermissionRegistry:
    return services.registry


def get_media_indexer(services: AppServices = Depends(get_services)) -> MediaIndexer:
    return services.indexer
