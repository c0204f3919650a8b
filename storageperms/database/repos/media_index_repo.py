# storageperms/database/repos/media_index_repo.py
from __future__ import annotations

import logging
from typing import Collection, Optional, List

from sqlalchemy import func, inspect, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from storageperms.database.core.main import make_session_factory
from storageperms.database.core.transaction import transactional
from storageperms.database.models import Base, MediaStoreFile as DBFile
from storageperms.domain.dataclasses.media_index import MediaIndexRow

log = logging.getLogger(__name__)


class SqlAlchemyMediaIndex:
    """
    SQLite-backed media index. Satisfies MediaIndexPort via structural typing.

    Failures are reported the way the platform content resolver reports
    them: no content URI when the index can't be opened, no rows (None)
    when the query itself fails.
    """

    def __init__(self, engine: Engine, *, content_uri: str) -> None:
        self.engine = engine
        self._content_uri = content_uri
        self._sessions = make_session_factory(engine)

    def create_schema(self) -> None:
        Base.metadata.create_all(bind=self.engine, tables=[DBFile.__table__])

    # --------- MediaIndexPort ---------

    def content_uri(self) -> Optional[str]:
        try:
            if not inspect(self.engine).has_table(DBFile.__tablename__):
                log.warning("media index has no %r table", DBFile.__tablename__)
                return None
        except SQLAlchemyError as e:
            log.warning("media index unavailable: %s", e)
            return None
        return self._content_uri

    def query(self, *, media_types: Collection[int], limit: int) -> Optional[List[MediaIndexRow]]:
        stmt = (
            select(DBFile)
            .where(DBFile.media_type.in_(list(media_types)))
            .order_by(DBFile.date_added.desc(), DBFile.id.desc())
            .limit(limit)
        )
        try:
            with self._sessions() as session:
                rows = session.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            log.warning("media index query failed: %s", e)
            return None
        return [self._to_row(r) for r in rows]

    # --------- Writes ---------

    def insert(
        self,
        *,
        display_name: Optional[str],
        size: int,
        media_type: int,
        mime_type: Optional[str],
        data: Optional[str] = None,
        date_added: int = 0,
    ) -> int:
        with transactional(self._sessions) as session:
            obj = DBFile(
                display_name=display_name,
                size=size,
                media_type=media_type,
                mime_type=mime_type,
                data=data,
                date_added=date_added,
            )
            session.add(obj)
            session.flush()
            return int(obj.id)

    def find_id_by_path(self, data: str) -> Optional[int]:
        stmt = select(DBFile.id).where(DBFile.data == data).limit(1)
        with self._sessions() as session:
            return session.execute(stmt).scalars().first()

    def count(self) -> int:
        with self._sessions() as session:
            return int(session.execute(select(func.count()).select_from(DBFile)).scalar_one())

    @staticmethod
    def _to_row(r: DBFile) -> MediaIndexRow:
        return MediaIndexRow(
            id=int(r.id),
            display_name=r.display_name,
            size_bytes=int(r.size or 0),
            media_type=int(r.media_type),
            mime_type=r.mime_type,
            data=r.data,
            date_added=int(r.date_added or 0),
        )
