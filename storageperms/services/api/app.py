# storageperms/services/api/app.py
from __future__ import annotations

from fastapi import FastAPI

from storageperms.common.logging import get_logger
from storageperms.common.settings import get_settings
from storageperms.services.api.routers import health, library, permissions, state

cfg = get_settings()


def create_app() -> FastAPI:
    get_logger(level=cfg.log_level)
    app = FastAPI(
        title="Storage Permissions API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    # Routers
    app.include_router(health.router)
    app.include_router(state.router)
    app.include_router(library.router)
    app.include_router(permissions.router)
    return app

app = create_app()
