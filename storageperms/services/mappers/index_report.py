from __future__ import annotations

from storageperms.domain.dataclasses.reports import IndexReport
from storageperms.services.schemas.state import IndexRunResponse


def to_index_response(root: str, rep: IndexReport) -> IndexRunResponse:
    return IndexRunResponse(
        ok=rep.errors == 0,
        root=root,
        started_at=rep.started_at,
        finished_at=rep.finished_at,
        scanned=rep.scanned,
        indexed=rep.indexed,
        skipped=rep.skipped,
        errors=rep.errors,
        error_details=[f"{subject}: {msg}" for subject, msg in rep.error_details],
    )
