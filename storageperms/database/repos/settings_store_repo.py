# storageperms/database/repos/settings_store_repo.py
from __future__ import annotations

from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from storageperms.database.core.main import make_session_factory
from storageperms.database.core.transaction import transactional
from storageperms.database.models import Base, Preference as DBPreference
from storageperms.domain.errors import PreferencesUnavailable

_TRUE = "true"
_FALSE = "false"


class SqlAlchemySettingsStore:
    """
    Durable key/value preferences. Satisfies KeyValueStorePort.
    Each write is its own transaction; set_bool returns only after COMMIT.
    Database errors surface as PreferencesUnavailable.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._sessions = make_session_factory(engine)

    def create_schema(self) -> None:
        Base.metadata.create_all(bind=self.engine, tables=[DBPreference.__table__])

    def get_bool(self, key: str) -> Optional[bool]:
        try:
            with self._sessions() as session:
                row = session.get(DBPreference, key)
                if row is None or row.value is None:
                    return None
                return row.value == _TRUE
        except SQLAlchemyError as e:
            raise PreferencesUnavailable(f"read {key!r} failed: {e}") from e

    def set_bool(self, key: str, value: bool) -> None:
        encoded = _TRUE if value else _FALSE
        try:
            with transactional(self._sessions) as session:
                row = session.get(DBPreference, key)
                if row is None:
                    session.add(DBPreference(key=key, value=encoded))
                else:
                    row.value = encoded
        except SQLAlchemyError as e:
            raise PreferencesUnavailable(f"write {key!r} failed: {e}") from e

    def delete(self, key: str) -> None:
        try:
            with transactional(self._sessions) as session:
                row = session.get(DBPreference, key)
                if row is not None:
                    session.delete(row)
        except SQLAlchemyError as e:
            raise PreferencesUnavailable(f"delete {key!r} failed: {e}") from e
