from __future__ import annotations
from enum import StrEnum


class QueryStatus(StrEnum):
    not_started = "not_started"
    loading = "loading"
    done = "done"
