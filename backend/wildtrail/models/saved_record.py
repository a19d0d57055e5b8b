"""Saved record model - one serialized state record per storage key."""

from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from wildtrail.db.database import Base


class SavedRecord(Base):
    __tablename__ = "saved_records"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)  # e.g. "game_state"
    payload: Mapped[str] = mapped_column(Text)  # JSON document

    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )
