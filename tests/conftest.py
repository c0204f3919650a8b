# tests/conftest.py
from __future__ import annotations
import os
import tempfile
from typing import Dict, List, Optional

import pytest

# Routers read settings at import time; keep them away from the working tree.
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATA_ROOT", tempfile.mkdtemp(prefix="storageperms-test-"))

from storageperms.database.core.main import make_engine
from storageperms.domain.dataclasses.device import DeviceInfo
from storageperms.domain.dataclasses.media_index import MediaIndexRow


class FakeOracle:
    def __init__(self, granted=()):
        self.granted = set(granted)
        self.calls: List[str] = []

    def is_granted(self, permission: str) -> bool:
        self.calls.append(str(permission))
        return str(permission) in self.granted


class FakeStore:
    def __init__(self, initial: Optional[Dict[str, bool]] = None):
        self.data: Dict[str, bool] = dict(initial or {})
        self.writes: List[tuple] = []

    def get_bool(self, key: str) -> Optional[bool]:
        return self.data.get(key)

    def set_bool(self, key: str, value: bool) -> None:
        self.writes.append((key, value))
        self.data[key] = value


class FakeIndex:
    """Scriptable MediaIndexPort: rows are returned as given (caller controls order)."""

    def __init__(self, rows=(), *, uri: Optional[str] = "content://media/external/file", rejected=False, raises=None):
        self.rows = list(rows)
        self.uri = uri
        self.rejected = rejected
        self.raises = raises
        self.queries: List[dict] = []

    def content_uri(self) -> Optional[str]:
        return self.uri

    def query(self, *, media_types, limit):
        self.queries.append({"media_types": tuple(media_types), "limit": limit})
        if self.raises is not None:
            raise self.raises
        if self.rejected:
            return None
        return list(self.rows)


def make_row(i: int, *, media_type: int = 1, date_added: Optional[int] = None, **kw) -> MediaIndexRow:
    return MediaIndexRow(
        id=i,
        display_name=kw.get("display_name", f"file_{i}.jpg"),
        size_bytes=kw.get("size_bytes", 100 + i),
        media_type=media_type,
        mime_type=kw.get("mime_type", "image/jpeg" if media_type == 1 else "video/mp4"),
        data=kw.get("data", f"/storage/emulated/0/DCIM/file_{i}"),
        date_added=date_added if date_added is not None else 1_700_000_000 + i,
    )


@pytest.fixture()
def device() -> DeviceInfo:
    return DeviceInfo(release="13", sdk_int=33, target_sdk=33)


@pytest.fixture()
def oracle() -> FakeOracle:
    return FakeOracle()


@pytest.fixture()
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture()
def sqlite_engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def make_index():
    """Factory for FakeIndex so tests can script rows / failures."""
    return FakeIndex


@pytest.fixture()
def row():
    """Factory for MediaIndexRow test rows."""
    return make_row
