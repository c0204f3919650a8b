# storageperms/services/api/routers/permissions.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from storageperms.common.settings import get_settings
from storageperms.services.api.deps import get_permission_registry, get_state_manager
from storageperms.services.library.state_manager import StorageStateManager
from storageperms.services.mappers.ui_state import to_state_read
from storageperms.services.permissions.registry import InMemoryPermissionRegistry
from storageperms.services.schemas.state import PermissionDecision, UiStateRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/permissions", tags=["permissions"])


@router.post("/request", response_model=UiStateRead)
def request_permissions(
    manager: StorageStateManager = Depends(get_state_manager),
    registry: InMemoryPermissionRegistry = Depends(get_permission_registry),
) -> UiStateRead:
    grants = registry.request([p.value for p in manager.permissions])
    state = manager.record_permission_decision(grants)
    return to_state_read(manager, state)


@router.post("/decision", response_model=UiStateRead)
def record_decision(
    payload: PermissionDecision,
    manager: StorageStateManager = Depends(get_state_manager),
    registry: InMemoryPermissionRegistry = Depends(get_permission_registry),
) -> UiStateRead:
    """Result of a permission prompt shown by the client."""
    registry.apply(payload.grants)
    state = manager.record_permission_decision(payload.grants)
    return to_state_read(manager, state)
