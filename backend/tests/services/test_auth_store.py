"""Auth Store — session state machine and roster over a recording store.

Invariants:
    - Use before initialize() raises AuthStoreNotInitializedError
    - initialize() seeds and persists the roster only when absent/malformed
    - login/register/logout/update_plan persist exactly the keys they own
    - Failed operations (bad credentials, duplicates, anonymous plan change) write nothing
    - Store failures never escape; in-memory state keeps the change
"""

from datetime import date

import pytest

from patoapp.core.domain_types import Plan, Role, ROSTER_KEY, SESSION_KEY
from patoapp.core.errors import AuthStoreNotInitializedError
from patoapp.schemas.user import User, UserProfile
from patoapp.services.auth_store import AuthStore, dump_users, seed_users

from tests.fake_store import RecordingStore


def _profile(**overrides) -> UserProfile:
    data = {
        "first_name": "Ana",
        "last_name": "López",
        "email": "ana@example.com",
        "username": "analopez",
        "password": "secreto1",
    }
    data.update(overrides)
    return UserProfile(**data)


# -- Initialization -------------------------------------------------------------


async def test_use_before_initialize_is_misuse():
    store = AuthStore(RecordingStore())
    with pytest.raises(AuthStoreNotInitializedError):
        _ = store.user
    with pytest.raises(AuthStoreNotInitializedError):
        await store.login("juan@example.com", "123456")


async def test_initialize_on_empty_store_seeds_roster(store):
    auth = AuthStore(store)
    await auth.initialize()
    assert auth.user is None
    assert auth.users == seed_users()
    assert store.writes == [(ROSTER_KEY, dump_users(seed_users()))]


async def test_initialize_restores_saved_session(seeded_store):
    juan = seed_users()[0]
    seeded_store.data[SESSION_KEY] = juan.model_dump_json()
    auth = AuthStore(seeded_store)
    await auth.initialize()
    assert auth.user == juan
    assert auth.is_authenticated


async def test_initialize_uses_stored_roster_without_write():
    roster = seed_users()[:1]
    store = RecordingStore({ROSTER_KEY: dump_users(roster)})
    auth = AuthStore(store)
    await auth.initialize()
    assert auth.users == roster
    assert store.writes == []


async def test_malformed_session_starts_anonymous(seeded_store):
    seeded_store.data[SESSION_KEY] = "{not json"
    auth = AuthStore(seeded_store)
    await auth.initialize()
    assert auth.user is None


async def test_malformed_roster_is_reseeded():
    store = RecordingStore({ROSTER_KEY: '[{"email": "x"}]'})
    auth = AuthStore(store)
    await auth.initialize()
    assert auth.users == seed_users()
    assert store.written_keys() == [ROSTER_KEY]


async def test_initialize_survives_unreadable_store():
    auth = AuthStore(RecordingStore(fail_reads=True))
    await auth.initialize()
    assert auth.user is None
    assert auth.users == seed_users()


async def test_failed_roster_read_keeps_stored_accounts():
    stored = dump_users([*seed_users(), User(
        **_profile(email="new@example.com").model_dump(),
        id="u-new", role=Role.USER, plan=Plan.FREE, registered_on="2024-05-01",
    )])
    store = RecordingStore({ROSTER_KEY: stored}, fail_reads=True)
    auth = AuthStore(store)
    await auth.initialize()

    assert auth.users == seed_users()
    assert store.writes == []
    assert store.data[ROSTER_KEY] == stored


# -- Login ----------------------------------------------------------------------


async def test_login_with_valid_credentials(auth, seeded_store):
    assert await auth.login("juan@example.com", "123456") is True
    assert auth.user.email == "juan@example.com"
    assert auth.user.role == Role.ADMIN
    assert seeded_store.writes == [(SESSION_KEY, auth.user.model_dump_json())]


async def test_login_with_wrong_password(auth, seeded_store):
    assert await auth.login("juan@example.com", "wrong") is False
    assert auth.user is None
    assert seeded_store.writes == []


async def test_login_with_unknown_email(auth):
    assert await auth.login("nadie@example.com", "123456") is False
    assert not auth.is_authenticated


# -- Register -------------------------------------------------------------------


async def test_register_new_account(auth, seeded_store):
    before = len(auth.users)
    assert await auth.register(_profile()) is True

    users = auth.users
    assert len(users) == before + 1
    created = users[-1]
    assert created.email == "ana@example.com"
    assert created.role == Role.USER
    assert created.plan == Plan.FREE
    assert created.registered_on == date.today().isoformat()
    assert created.id and created.id not in {u.id for u in users[:-1]}

    assert seeded_store.written_keys() == [ROSTER_KEY]
    persisted = [User.model_validate(u) for u in seeded_store.load(ROSTER_KEY)]
    assert persisted == users


async def test_register_does_not_log_in(auth):
    await auth.register(_profile())
    assert auth.user is None


async def test_register_duplicate_email_rejected(auth, seeded_store):
    assert await auth.register(_profile(email="juan@example.com")) is False
    assert len(auth.users) == 2
    assert seeded_store.writes == []


async def test_register_duplicate_username_rejected(auth, seeded_store):
    assert await auth.register(_profile(username="mariagonzalez")) is False
    assert len(auth.users) == 2
    assert seeded_store.writes == []


async def test_register_uniqueness_is_case_sensitive(auth):
    assert await auth.register(_profile(email="JUAN@example.com", username="JuanPerez")) is True


async def test_registered_account_can_log_in(auth):
    await auth.register(_profile())
    assert await auth.login("ana@example.com", "secreto1") is True
    assert auth.user.username == "analopez"


# -- Logout ---------------------------------------------------------------------


async def test_logout_clears_session_and_key(auth, seeded_store):
    await auth.login("maria@example.com", "123456")
    roster_before = auth.users

    await auth.logout()

    assert auth.user is None
    assert SESSION_KEY not in seeded_store.data
    assert seeded_store.removals == [SESSION_KEY]
    assert auth.users == roster_before


# -- Plan -----------------------------------------------------------------------


async def test_update_plan_updates_session_and_roster(auth, seeded_store):
    await auth.login("maria@example.com", "123456")
    seeded_store.writes.clear()

    await auth.update_plan(Plan.PAID)

    assert auth.user.plan == Plan.PAID
    maria = next(u for u in auth.users if u.email == "maria@example.com")
    assert maria.plan == Plan.PAID
    assert seeded_store.written_keys() == [SESSION_KEY, ROSTER_KEY]
    assert seeded_store.load(SESSION_KEY)["plan"] == "paid"
    stored_maria = next(
        u for u in seeded_store.load(ROSTER_KEY) if u["email"] == "maria@example.com"
    )
    assert stored_maria["plan"] == "paid"


async def test_update_plan_leaves_other_accounts(auth):
    await auth.login("maria@example.com", "123456")
    await auth.update_plan(Plan.PAID)
    juan = next(u for u in auth.users if u.email == "juan@example.com")
    assert juan == seed_users()[0]


async def test_update_plan_while_anonymous_writes_nothing(auth, seeded_store):
    await auth.update_plan(Plan.PAID)
    assert seeded_store.writes == []
    assert all(u.plan == s.plan for u, s in zip(auth.users, seed_users()))


# -- Storage failures -----------------------------------------------------------


async def test_write_failures_keep_in_memory_state(auth, seeded_store):
    seeded_store.fail_writes = True

    assert await auth.login("maria@example.com", "123456") is True
    await auth.update_plan(Plan.PAID)
    assert auth.user.plan == Plan.PAID

    assert await auth.register(_profile()) is True
    assert len(auth.users) == 3

    await auth.logout()
    assert auth.user is None
