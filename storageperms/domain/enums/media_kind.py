from __future__ import annotations
from enum import StrEnum


class MediaKind(StrEnum):
    image = "image"
    video = "video"

    @property
    def code(self) -> int:
        """Provider-side media_type column value."""
        return MEDIA_TYPE_CODES[self]

    @classmethod
    def from_code(cls, code: int) -> "MediaKind":
        # rows are pre-filtered to image/video, so anything that isn't an image is a video
        return cls.image if int(code) == MEDIA_TYPE_CODES[cls.image] else cls.video


# MediaStore.Files.FileColumns.MEDIA_TYPE_IMAGE / MEDIA_TYPE_VIDEO
MEDIA_TYPE_CODES = {
    MediaKind.image: 1,
    MediaKind.video: 3,
}
