# storageperms/services/api/routers/library.py
from __future__ import annotations

from http import HTTPStatus
from pathlib import Path
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from storageperms.common.settings import get_settings
from storageperms.domain.entities.ui_state import UiState
from storageperms.services.api.deps import get_media_indexer, get_state_manager
from storageperms.services.indexing.indexer import MediaIndexer
from storageperms.services.library.state_manager import StorageStateManager
from storageperms.services.mappers.index_report import to_index_response
from storageperms.services.mappers.ui_state import to_state_read
from storageperms.services.schemas.state import IndexRunRequest, IndexRunResponse, UiStateRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/library", tags=["library"])


@router.post("/refresh", response_model=UiStateRead, status_code=HTTPStatus.ACCEPTED)
def refresh_library(manager: StorageStateManager = Depends(get_state_manager)) -> UiStateRead:
    """
    Kick off a library query and answer with the Loading snapshot.
    Poll GET /state (or wait on the next call) for the Done result.
    """
    published: List[UiState] = []
    unsubscribe = manager.subscribe(published.append)
    try:
        manager.refresh_library()
    finally:
        unsubscribe()
    # first publication is always the synchronous Loading state
    return to_state_read(manager, published[0] if published else None)


@router.post("/index", response_model=IndexRunResponse)
def index_directory(
    body: IndexRunRequest,
    indexer: MediaIndexer = Depends(get_media_indexer),
) -> IndexRunResponse:
    """
    Scan a directory into the media index. Does not refresh the library;
    call POST /refresh afterwards to see the new rows.
    """
    root = body.root or (str(indexer.cfg.library.scan_root) if indexer.cfg.library.scan_root else None)
    if not root:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail="no root given and library.scan_root is unset")
    if not Path(root).is_dir():
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=f"not a directory: {root}")

    rep = indexer.index_directory(Path(root), recursive=body.recursive)
    return to_index_response(root, rep)
