from __future__ import annotations

from typing import Optional

from storageperms.domain.entities.ui_state import UiState
from storageperms.services.library.state_manager import StorageStateManager
from storageperms.services.schemas.state import MediaFileRead, UiStateRead


def to_state_read(manager: StorageStateManager, state: Optional[UiState] = None) -> UiStateRead:
    s = state or manager.state
    return UiStateRead(
        android_version=manager.device.release,
        device_sdk=manager.device.sdk_int,
        target_sdk=s.target_sdk,
        has_read_external_storage_been_granted=manager.has_read_external_storage_been_granted(),
        permissions=[p.value for p in s.permissions],
        has_storage_access=s.has_storage_access,
        query_status=s.query_status,
        items=[MediaFileRead.model_validate(i) for i in s.items],
    )
