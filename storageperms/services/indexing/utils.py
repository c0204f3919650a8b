from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Optional

from storageperms.common.settings import get_settings
from storageperms.domain.enums.media_kind import MediaKind


def media_kind_for(p: Path, cfg=None) -> Optional[MediaKind]:
    """Classify by whitelisted extension; None for anything else."""
    cfg = cfg or get_settings()
    ext = p.suffix.lower().lstrip(".")
    if ext in set(cfg.image_exts):
        return MediaKind.image
    if ext in set(cfg.video_exts):
        return MediaKind.video
    return None


def is_supported_media_file(p: Path, cfg=None) -> bool:
    """Accept only whitelisted video/image extensions."""
    if not p.is_file():
        return False
    if p.name.startswith("."):
        return False
    return media_kind_for(p, cfg) is not None


def guess_mime_type(p: Path, kind: MediaKind) -> str:
    mime, _ = mimetypes.guess_type(p.name)
    return mime or f"{kind.value}/*"
