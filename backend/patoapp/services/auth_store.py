"""Auth Store — account roster and the single active session, mirrored to storage.

Invariants:
    - States: anonymous (user is None) and authenticated (user is set)
    - login() only matches exact email AND password; failure leaves state unchanged
    - register() rejects a duplicate email OR username (case-sensitive) with no roster change;
      new accounts are always role=user, plan=free, and are NOT logged in
    - logout() clears the session and removes the session key; roster untouched
    - update_plan() while anonymous writes nothing
    - Email and username stay unique across the roster at all times
    - Store writes are best-effort: failures are logged, in-memory state keeps the change
    - A failed roster read serves the default roster in memory but never writes it,
      so a transient read error cannot overwrite stored accounts
    - Every public member raises AuthStoreNotInitializedError before initialize()

Design Decisions:
    - Explicit instance injected into routes instead of a module global: tests build
      independent stores over independent key-value fakes
    - In-memory roster is authoritative after initialize(); the store is a mirror
    - login()/register() are async only because they persist; there is no other suspension
"""

import json
import logging
from datetime import date
from uuid import uuid4

from pydantic import TypeAdapter, ValidationError

from patoapp.core.domain_types import Plan, Role, ROSTER_KEY, SESSION_KEY
from patoapp.core.errors import AuthStoreNotInitializedError
from patoapp.core.repository_protocols import KeyValueStore
from patoapp.core.seed_data import default_users
from patoapp.schemas.user import User, UserProfile

logger = logging.getLogger(__name__)

_USER_LIST = TypeAdapter(list[User])


def seed_users() -> list[User]:
    return _USER_LIST.validate_python(default_users())


def dump_users(users: list[User]) -> str:
    return json.dumps(
        [u.model_dump(mode="json") for u in users], ensure_ascii=False,
    )


class AuthStore:
    """Roster + session state machine over a KeyValueStore."""

    def __init__(self, store: KeyValueStore):
        self._store = store
        self._initialized = False
        self._user: User | None = None
        self._users: list[User] = []

    # ─── Lifecycle ──────────────────────────────────────────────

    async def initialize(self) -> None:
        """Load session and roster; seed the roster when absent or malformed."""
        saved_user = await self._read(SESSION_KEY)
        if saved_user:
            try:
                self._user = User.model_validate_json(saved_user)
            except ValidationError:
                logger.warning(
                    "Stored session is malformed, starting anonymous",
                    extra={"storage_key": SESSION_KEY},
                )

        try:
            saved_users = await self._store.get(ROSTER_KEY)
        except Exception as e:
            logger.error(
                f"Roster read failed, serving defaults without persisting: {e}",
                extra={"storage_key": ROSTER_KEY},
            )
            self._users = seed_users()
        else:
            self._users = await self._load_roster(saved_users)

        self._initialized = True
        logger.info(
            f"Auth store ready: {len(self._users)} accounts, "
            f"session={'yes' if self._user else 'no'}",
        )

    # ─── State ──────────────────────────────────────────────────

    @property
    def user(self) -> User | None:
        self._require_initialized()
        return self._user

    @property
    def users(self) -> list[User]:
        self._require_initialized()
        return list(self._users)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    # ─── Transitions ────────────────────────────────────────────

    async def login(self, email: str, password: str) -> bool:
        self._require_initialized()
        found = next(
            (u for u in self._users if u.email == email and u.password == password),
            None,
        )
        if found is None:
            logger.info("Login rejected")
            return False

        self._user = found
        await self._write(SESSION_KEY, found.model_dump_json())
        logger.info("Login succeeded", extra={"user_id": found.id})
        return True

    async def register(self, profile: UserProfile) -> bool:
        self._require_initialized()
        email_taken = any(u.email == profile.email for u in self._users)
        username_taken = any(u.username == profile.username for u in self._users)
        if email_taken or username_taken:
            return False

        taken = {u.id for u in self._users}
        new_id = uuid4().hex
        while new_id in taken:
            new_id = uuid4().hex

        account = User(
            **profile.model_dump(),
            id=new_id,
            role=Role.USER,
            plan=Plan.FREE,
            registered_on=date.today().isoformat(),
        )
        self._users = [*self._users, account]
        await self._write(ROSTER_KEY, dump_users(self._users))
        logger.info("Registered account", extra={"user_id": account.id})
        return True

    async def logout(self) -> None:
        self._require_initialized()
        previous = self._user
        self._user = None
        try:
            await self._store.remove(SESSION_KEY)
        except Exception as e:
            logger.error(
                f"Session removal failed: {e}",
                extra={"storage_key": SESSION_KEY},
                exc_info=True,
            )
        if previous:
            logger.info("Logged out", extra={"user_id": previous.id})

    async def update_plan(self, plan: Plan) -> None:
        self._require_initialized()
        if self._user is None:
            return

        updated = self._user.model_copy(update={"plan": plan})
        self._user = updated
        await self._write(SESSION_KEY, updated.model_dump_json())

        self._users = [
            updated if u.id == updated.id else u for u in self._users
        ]
        await self._write(ROSTER_KEY, dump_users(self._users))
        logger.info(f"Plan set to {plan.value}", extra={"user_id": updated.id})

    # ─── Helpers ────────────────────────────────────────────────

    async def _load_roster(self, saved: str | None) -> list[User]:
        """Parse the stored roster; seed and persist it when absent or malformed."""
        if saved:
            try:
                return _USER_LIST.validate_json(saved)
            except ValidationError:
                logger.warning(
                    "Stored roster is malformed, reseeding",
                    extra={"storage_key": ROSTER_KEY},
                )
        roster = seed_users()
        await self._write(ROSTER_KEY, dump_users(roster))
        return roster

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise AuthStoreNotInitializedError()

    async def _read(self, key: str) -> str | None:
        try:
            return await self._store.get(key)
        except Exception as e:
            logger.error(
                f"Read failed, treating as absent: {e}", extra={"storage_key": key},
            )
            return None

    async def _write(self, key: str, value: str) -> None:
        try:
            await self._store.set(key, value)
        except Exception as e:
            logger.error(
                f"Write failed, keeping in-memory state: {e}",
                extra={"storage_key": key},
                exc_info=True,
            )
