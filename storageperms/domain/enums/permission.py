from __future__ import annotations
from enum import StrEnum


class Permission(StrEnum):
    read_external_storage = "android.permission.READ_EXTERNAL_STORAGE"
    write_external_storage = "android.permission.WRITE_EXTERNAL_STORAGE"
    read_media_images = "android.permission.READ_MEDIA_IMAGES"
    read_media_video = "android.permission.READ_MEDIA_VIDEO"
