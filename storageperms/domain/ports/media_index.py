from __future__ import annotations
from typing import Collection, Optional, Protocol, Sequence

from storageperms.domain.dataclasses.media_index import MediaIndexRow


class MediaIndexPort(Protocol):
    def content_uri(self) -> Optional[str]:
        """Base URI for item locators, or None when the index can't be opened."""
        ...

    def query(self, *, media_types: Collection[int], limit: int) -> Optional[Sequence[MediaIndexRow]]:
        """Rows matching media_types, newest date_added first; None if the query failed."""
        ...
