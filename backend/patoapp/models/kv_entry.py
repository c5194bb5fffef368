"""KV Entry ORM — one row per storage key holding a serialized JSON document.

Invariants:
    - key is the primary key (one document per key)
    - value is the full document; writes replace it wholesale
    - updated_at refreshed on every write

Design Decisions:
    - Text column over JSON: the store is a dumb substrate, parsing belongs to
      the services that own each key (malformed values must reach them intact)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from patoapp.db.base import Base


class KVEntry(Base):
    """Durable key-value row."""
    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
