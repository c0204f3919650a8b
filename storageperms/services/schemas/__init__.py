from storageperms.services.schemas.state import (
    MediaFileRead,
    UiStateRead,
    PermissionDecision,
    IndexRunRequest,
    IndexRunResponse,
)
__all__ = [
    "MediaFileRead",
    "UiStateRead",
    "PermissionDecision",
    "IndexRunRequest",
    "IndexRunResponse",
]
