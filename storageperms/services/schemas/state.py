# storageperms/services/schemas/state.py
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from storageperms.domain.enums.media_kind import MediaKind
from storageperms.domain.enums.query_status import QueryStatus


class MediaFileRead(BaseModel):
    id: int
    uri: str
    kind: MediaKind
    filename: str
    size_bytes: int = Field(0, ge=0)
    mime_type: str
    path: str = ""

    model_config = ConfigDict(from_attributes=True, use_enum_values=False)


class UiStateRead(BaseModel):
    # device info
    android_version: str
    device_sdk: int
    target_sdk: int

    # None -> no record yet
    has_read_external_storage_been_granted: Optional[bool] = None

    permissions: List[str] = Field(default_factory=list)
    has_storage_access: bool = False
    query_status: QueryStatus = QueryStatus.not_started
    items: List[MediaFileRead] = Field(default_factory=list)


class PermissionDecision(BaseModel):
    grants: Dict[str, bool] = Field(default_factory=dict)


class IndexRunRequest(BaseModel):
    # Optional: directory to scan; falls back to library.scan_root
    root: Optional[str] = Field(None, description="Directory to index", examples=["/sdcard/DCIM"])
    recursive: bool = True


class IndexRunResponse(BaseModel):
    ok: bool
    root: str
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    scanned: int = 0
    indexed: int = 0
    skipped: int = 0
    errors: int = 0
    error_details: List[str] = Field(default_factory=list)
