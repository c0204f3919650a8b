# storageperms/database/core/transaction.py
from __future__ import annotations

from contextlib import contextmanager

from sqlalchemy.orm import Session, sessionmaker

from storageperms.database.core.main import session_scope


@contextmanager
def transactional(factory: sessionmaker[Session]):
    yield from session_scope(factory)
