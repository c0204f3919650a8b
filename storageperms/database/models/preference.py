from __future__ import annotations

from typing import Optional

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from storageperms.database.core.main import Base


class Preference(Base):
    __tablename__ = "preferences"

    key: Mapped[str] = mapped_column(Text, primary_key=True)
    # Stored as text so one table can hold any preference type
    value: Mapped[Optional[str]] = mapped_column(Text)
