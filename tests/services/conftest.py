# tests/services/conftest.py
from __future__ import annotations
import pytest
from starlette.testclient import TestClient

from storageperms.common.settings import Settings
from storageperms.services.api.app import create_app
from storageperms.services.api.deps import build_services, get_services


@pytest.fixture()
def api_services(tmp_path):
    """
    Real adapters on throwaway SQLite files. The device is an Android 13
    phone running an app that targets 33.
    """
    cfg = Settings(
        data_root=tmp_path,
        device={"release": "13", "sdk_int": 33, "target_sdk": 33},
        permissions={"auto_grant": ["android.permission.READ_MEDIA_IMAGES", "android.permission.READ_MEDIA_VIDEO"]},
    )
    services = build_services(cfg)
    try:
        yield services
    finally:
        services.manager.shutdown(wait=True)
        services.media_index.engine.dispose()
        services.store.engine.dispose()


@pytest.fixture()
def api_client(api_services):
    """
    A TestClient whose `get_services` dependency is overridden so every
    request in one test shares the same manager and stores.
    """
    app = create_app()
    app.dependency_overrides[get_services] = lambda: api_services
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
