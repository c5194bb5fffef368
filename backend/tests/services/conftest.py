"""Service test fixtures — recording key-value store, repository, auth store, SQL store.

Invariants:
    - Every test gets a fresh RecordingStore (no shared state between tests)
    - seeded_store already holds the default catalog and roster, so the
      write log only shows writes made by the code under test
    - sql_manager uses a throwaway SQLite file per test

Design Decisions:
    - SQLite file over :memory:: every pooled connection sees the same database
"""

import pytest

from patoapp.core.domain_types import PATOS_KEY, ROSTER_KEY
from patoapp.infrastructure.database import DatabaseSessionManager
from patoapp.infrastructure.kv_store import SqlKeyValueStore
from patoapp.services.auth_store import AuthStore, dump_users, seed_users
from patoapp.services.pato_repository import PatoRepository, dump_patos, seed_patos

from tests.fake_store import RecordingStore


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def seeded_store():
    return RecordingStore({
        PATOS_KEY: dump_patos(seed_patos()),
        ROSTER_KEY: dump_users(seed_users()),
    })


@pytest.fixture
def repo(seeded_store):
    return PatoRepository(seeded_store)


@pytest.fixture
async def auth(seeded_store):
    store = AuthStore(seeded_store)
    await store.initialize()
    return store


@pytest.fixture
async def sql_manager(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'kv.db'}")
    await manager.create_tables()
    yield manager
    await manager.dispose()


@pytest.fixture
def sql_store(sql_manager):
    return SqlKeyValueStore(sql_manager)
