"""
SQLAlchemy ORM models for persistent storage.

The cache is a single key-value table: fingerprint digest to serialized item.
"""

from datetime import datetime

from sqlalchemy import DateTime, LargeBinary, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

CACHE_TABLE_NAME = "rarity_cache"


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class RarityCacheEntryDB(Base):
    """
    One cached item lookup.

    Keyed by the SHA-256 fingerprint of "collection:id"; the payload is the
    JSON bytes exactly as served to clients.
    """

    __tablename__ = CACHE_TABLE_NAME

    fingerprint: Mapped[bytes] = mapped_column(LargeBinary(32), primary_key=True)
    payload: Mapped[bytes] = mapped_column(LargeBinary)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<RarityCacheEntryDB(fingerprint={self.fingerprint.hex()[:12]}...)>"
