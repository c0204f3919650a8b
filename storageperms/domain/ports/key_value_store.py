from __future__ import annotations
from typing import Optional, Protocol


class KeyValueStorePort(Protocol):
    def get_bool(self, key: str) -> Optional[bool]: ...

    def set_bool(self, key: str, value: bool) -> None: ...
