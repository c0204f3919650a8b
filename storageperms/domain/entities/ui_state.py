# storageperms/domain/entities/ui_state.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple

from storageperms.domain.entities.media_file import MediaFile
from storageperms.domain.enums.permission import Permission
from storageperms.domain.enums.query_status import QueryStatus


@dataclass(frozen=True)
class UiState:
    """
    Snapshot consumed by the rendering surface. Never mutated in place:
    every transition produces a new instance via `copy()`.
    """
    target_sdk: int
    permissions: Tuple[Permission, ...]
    has_storage_access: bool
    query_status: QueryStatus = QueryStatus.not_started
    items: Tuple[MediaFile, ...] = field(default_factory=tuple)

    def copy(self, **changes) -> "UiState":
        if "items" in changes:
            changes["items"] = tuple(changes["items"])
        return replace(self, **changes)
