# storageperms/domain/dataclasses/reports.py
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple


@dataclass
class IndexReport:
    """Outcome of one directory indexing pass."""
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    scanned: int = 0
    indexed: int = 0
    skipped: int = 0
    errors: int = 0
    # Each tuple is (path, message)
    error_details: List[Tuple[str, str]] = field(default_factory=list)

    def start(self) -> None:
        if self.started_at is None:
            self.started_at = datetime.now()

    def stop(self) -> None:
        self.finished_at = datetime.now()

    def add_error(self, subject: str, message: str) -> None:
        self.errors += 1
        self.error_details.append((subject, message))

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
