from __future__ import annotations
from typing import Mapping, Protocol, Sequence


class PermissionOraclePort(Protocol):
    def is_granted(self, permission: str) -> bool: ...


class PermissionRequesterPort(Protocol):
    # Presents the system prompt; returns permission -> granted for everything asked
    def request(self, permissions: Sequence[str]) -> Mapping[str, bool]: ...
