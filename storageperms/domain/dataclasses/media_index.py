from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MediaIndexRow:
    # Column-for-column copy of what the index returns for one file
    id: int
    display_name: Optional[str]
    size_bytes: int
    media_type: int
    mime_type: Optional[str]
    data: Optional[str] = None   # legacy absolute path
    date_added: int = 0          # epoch seconds
