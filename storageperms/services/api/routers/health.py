# storageperms/services/api/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from storageperms.common.settings import get_settings
from storageperms.domain.errors import PreferencesUnavailable
from storageperms.domain.policies.storage_permissions import HAS_READ_EXTERNAL_STORAGE_BEEN_GRANTED
from storageperms.services.api.deps import AppServices, get_services

router = APIRouter()


def _preferences_readable(services: AppServices) -> bool:
    try:
        services.store.get_bool(HAS_READ_EXTERNAL_STORAGE_BEEN_GRANTED)
    except PreferencesUnavailable:
        return False
    return True


@router.get("/healthz")
def healthz(services: AppServices = Depends(get_services)):
    """Liveness plus a per-backend view: ok is False when either store is unusable."""
    s = get_settings()
    media_index_ok = services.media_index.content_uri() is not None
    preferences_ok = _preferences_readable(services)
    return {
        "ok": media_index_ok and preferences_ok,
        "app": s.app_name,
        "env": s.app_env,
        "storage": {
            "media_index": {"backend": services.media_index.engine.dialect.name, "available": media_index_ok},
            "preferences": {"backend": services.store.engine.dialect.name, "available": preferences_ok},
        },
    }
