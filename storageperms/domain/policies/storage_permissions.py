# storageperms/domain/policies/storage_permissions.py
from __future__ import annotations

from typing import Tuple

from storageperms.domain.enums.permission import Permission
from storageperms.domain.enums.version_code import VersionCode

PermissionSet = Tuple[Permission, ...]

GRANULAR_MEDIA: PermissionSet = (Permission.read_media_images, Permission.read_media_video)
READ_ONLY: PermissionSet = (Permission.read_external_storage,)
READ_WRITE: PermissionSet = (Permission.read_external_storage, Permission.write_external_storage)

# Key under which we remember whether READ_EXTERNAL_STORAGE was ever granted
HAS_READ_EXTERNAL_STORAGE_BEEN_GRANTED = "has_read_external_storage_been_granted"


def derive_required_permissions(
    os_version: int,
    target_sdk_version: int,
    *,
    granular_requires_target: bool = True,
) -> PermissionSet:
    """
    Storage permissions an app must hold to read the shared media library.

        os >= 33 and target >= 33   -> READ_MEDIA_IMAGES, READ_MEDIA_VIDEO
        os >= 30                    -> READ_EXTERNAL_STORAGE
        otherwise                   -> READ_EXTERNAL_STORAGE, WRITE_EXTERNAL_STORAGE

    An app targeting < 33 on an Android 13 device still goes through the legacy
    permission, so the granular branch checks the target too. Pass
    granular_requires_target=False to gate on the device version alone.
    """
    os_version = int(os_version)
    target_sdk_version = int(target_sdk_version)

    granular = os_version >= VersionCode.TIRAMISU and (
        not granular_requires_target or target_sdk_version >= VersionCode.TIRAMISU
    )
    if granular:
        return GRANULAR_MEDIA
    if os_version >= VersionCode.R:
        return READ_ONLY
    return READ_WRITE
