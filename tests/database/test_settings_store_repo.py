from __future__ import annotations

import pytest

from storageperms.database.repos.settings_store_repo import SqlAlchemySettingsStore
from storageperms.domain.errors import PreferencesUnavailable
from storageperms.domain.policies.storage_permissions import HAS_READ_EXTERNAL_STORAGE_BEEN_GRANTED

KEY = HAS_READ_EXTERNAL_STORAGE_BEEN_GRANTED


def test_get_bool_missing_is_none(settings_store):
    assert settings_store.get_bool(KEY) is None


def test_set_bool_then_overwrite(settings_store):
    settings_store.set_bool(KEY, True)
    assert settings_store.get_bool(KEY) is True
    settings_store.set_bool(KEY, False)
    assert settings_store.get_bool(KEY) is False


def test_value_survives_a_new_store_instance(sqlite_engine, settings_store):
    settings_store.set_bool(KEY, True)
    # a fresh adapter on the same database sees the committed value
    again = SqlAlchemySettingsStore(sqlite_engine)
    assert again.get_bool(KEY) is True


def test_delete(settings_store):
    settings_store.set_bool(KEY, True)
    settings_store.delete(KEY)
    assert settings_store.get_bool(KEY) is None
    settings_store.delete(KEY)  # no-op when absent


def test_missing_table_raises_preferences_unavailable(sqlite_engine):
    st = SqlAlchemySettingsStore(sqlite_engine)  # no create_schema()
    with pytest.raises(PreferencesUnavailable):
        st.get_bool(KEY)
    with pytest.raises(PreferencesUnavailable) as ei:
        st.set_bool(KEY, True)
    assert KEY in str(ei.value)
    with pytest.raises(PreferencesUnavailable):
        st.delete(KEY)
