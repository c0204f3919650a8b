# storageperms/services/api/routers/state.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from storageperms.common.settings import get_settings
from storageperms.services.api.deps import get_state_manager
from storageperms.services.library.state_manager import StorageStateManager
from storageperms.services.mappers.ui_state import to_state_read
from storageperms.services.schemas.state import UiStateRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}", tags=["state"])


@router.get("/state", response_model=UiStateRead)
def get_state(manager: StorageStateManager = Depends(get_state_manager)) -> UiStateRead:
    return to_state_read(manager)
