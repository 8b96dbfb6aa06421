"""SQLAlchemy ORM models for TimerDeck."""

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import DeclarativeBase


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class StoredValue(Base):
    """One serialized blob per key (``timers``, ``timer_history``)."""

    __tablename__ = "stored_values"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(64), nullable=False, unique=True)
    payload = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"<StoredValue key={self.key} bytes={len(self.payload or '')}>"
