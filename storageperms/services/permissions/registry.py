# storageperms/services/permissions/registry.py
from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, Mapping, Sequence

log = logging.getLogger(__name__)


class InMemoryPermissionRegistry:
    """
    Process-local permission state. Plays both roles the OS normally does:

      - oracle    : is_granted(permission)
      - requester : request(permissions) -> {permission: granted}

    `request` answers from `auto_grant` (nothing by default, so every prompt
    is "denied" unless configured). Decisions made by a real prompt elsewhere
    are fed in through `apply`.
    """

    def __init__(self, *, granted: Iterable[str] = (), auto_grant: Iterable[str] = ()) -> None:
        self._granted: set[str] = {str(p) for p in granted}
        self._auto_grant: frozenset[str] = frozenset(str(p) for p in auto_grant)
        self._lock = threading.Lock()

    # --- oracle ---
    def is_granted(self, permission: str) -> bool:
        with self._lock:
            return str(permission) in self._granted

    # --- requester ---
    def request(self, permissions: Sequence[str]) -> Dict[str, bool]:
        grants = {str(p): str(p) in self._auto_grant for p in permissions}
        self.apply(grants)
        log.info("permission prompt answered: %s", grants)
        return grants

    # --- mutation ---
    def apply(self, grants: Mapping[str, bool]) -> None:
        with self._lock:
            for perm, ok in grants.items():
                if ok:
                    self._granted.add(str(perm))
                else:
                    self._granted.discard(str(perm))

    def grant(self, *permissions: str) -> None:
        self.apply({p: True for p in permissions})

    def revoke(self, *permissions: str) -> None:
        self.apply({p: False for p in permissions})

    def granted(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._granted)
