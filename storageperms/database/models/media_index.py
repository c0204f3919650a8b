from __future__ import annotations

from typing import Optional

from sqlalchemy import BigInteger, Integer, Text, Index, text
from sqlalchemy.orm import Mapped, mapped_column

from storageperms.database.core.main import Base


class MediaStoreFile(Base):
    """
    Local stand-in for the platform's `files` table. Column names follow
    MediaStore.Files.FileColumns so rows read the same as on a device.
    """
    __tablename__ = "files"
    __table_args__ = (
        Index("ix_files_media_type_date_added", "media_type", "date_added"),
    )

    id: Mapped[int] = mapped_column("_id", Integer, primary_key=True, autoincrement=True)
    display_name: Mapped[Optional[str]] = mapped_column("_display_name", Text)
    size: Mapped[int] = mapped_column("_size", BigInteger, nullable=False, server_default=text("0"))
    media_type: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    mime_type: Mapped[Optional[str]] = mapped_column(Text)
    data: Mapped[Optional[str]] = mapped_column("_data", Text)   # absolute path
    date_added: Mapped[int] = mapped_column(BigInteger, nullable=False, server_default=text("0"))
