from __future__ import annotations
from enum import IntEnum


class VersionCode(IntEnum):
    # API levels where the storage permission model changed
    R = 30         # Android 11: scoped storage, WRITE_EXTERNAL_STORAGE no longer grants access
    TIRAMISU = 33  # Android 13: granular READ_MEDIA_* permissions
