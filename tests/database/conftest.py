# tests/database/conftest.py
from __future__ import annotations

import pytest

from storageperms.database.repos.media_index_repo import SqlAlchemyMediaIndex
from storageperms.database.repos.settings_store_repo import SqlAlchemySettingsStore

CONTENT_URI = "content://media/external/file"


@pytest.fixture()
def media_index(sqlite_engine) -> SqlAlchemyMediaIndex:
    idx = SqlAlchemyMediaIndex(sqlite_engine, content_uri=CONTENT_URI)
    idx.create_schema()
    return idx


@pytest.fixture()
def settings_store(sqlite_engine) -> SqlAlchemySettingsStore:
    st = SqlAlchemySettingsStore(sqlite_engine)
    st.create_schema()
    return st
