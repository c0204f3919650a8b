# storageperms/domain/entities/media_file.py
from __future__ import annotations

from dataclasses import dataclass, asdict

from storageperms.domain.enums.media_kind import MediaKind


@dataclass(frozen=True)
class MediaFile:
    """
    One image or video from the media index, as shown in the library grid.

    Instances only come out of a library query and live for one result set;
    the next refresh replaces the whole list.

      - uri   : content locator (<base content uri>/<id>)
      - path  : legacy filesystem path (may be empty on scoped-storage devices)
    """
    id: int
    uri: str
    kind: MediaKind
    filename: str
    size_bytes: int
    mime_type: str
    path: str = ""

    def __post_init__(self):
        if self.size_bytes < 0:
            raise ValueError("size_bytes must be >= 0")
        if not self.uri:
            raise ValueError("uri must be non-empty")

    @property
    def is_video(self) -> bool:
        return self.kind == MediaKind.video

    def as_dict(self):
        return asdict(self)
