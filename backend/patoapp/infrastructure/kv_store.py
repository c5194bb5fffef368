"""Key-Value Stores — durable (SQL) and in-memory implementations of KeyValueStore.

Invariants:
    - set() replaces the whole value for a key (no merge, no versioning)
    - get() of a missing key returns None, never raises
    - remove() of a missing key is a no-op
    - SQL failures surface as StorageError (mapped by DatabaseSessionManager)

Design Decisions:
    - Merge-based upsert: portable across SQLite and PostgreSQL
    - Last write wins across concurrent writers (no row locking); owners rewrite
      full documents so a lost update loses a whole document, never half of one
"""

import logging

from sqlalchemy import delete

from patoapp.infrastructure.database import DatabaseSessionManager
from patoapp.models.kv_entry import KVEntry

logger = logging.getLogger(__name__)


class SqlKeyValueStore:
    """KeyValueStore backed by the kv_entries table."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def get(self, key: str) -> str | None:
        async with self._manager.session() as db:
            entry = await db.get(KVEntry, key)
            return entry.value if entry else None

    async def set(self, key: str, value: str) -> None:
        async with self._manager.session() as db:
            await db.merge(KVEntry(key=key, value=value))
            await db.commit()
        logger.debug(f"Stored {len(value)} bytes", extra={"storage_key": key})

    async def remove(self, key: str) -> None:
        async with self._manager.session() as db:
            await db.execute(delete(KVEntry).where(KVEntry.key == key))
            await db.commit()
        logger.debug("Removed key", extra={"storage_key": key})

    async def ping(self) -> bool:
        return await self._manager.health_check()


class InMemoryKeyValueStore:
    """Dict-backed KeyValueStore — process-local, lost on restart."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value

    async def remove(self, key: str) -> None:
        self.data.pop(key, None)

    async def ping(self) -> bool:
        return True
