from storageperms.domain.enums.media_kind import MediaKind
from storageperms.domain.enums.permission import Permission
from storageperms.domain.enums.query_status import QueryStatus
from storageperms.domain.enums.version_code import VersionCode
__all__ = [
    "MediaKind",
    "Permission",
    "QueryStatus",
    "VersionCode",
]
