"""Route Dependencies — service lookup and access guards.

Invariants:
    - Services are read from app.state (built in lifespan, replaced in tests)
    - Missing auth store on app.state is the "used outside provider" misuse case
    - require_user → 401 when anonymous; require_admin → 403 for non-admins
    - Guards check the one shared session, not the calling client: after an admin
      logs in, every client passes require_admin until logout

Design Decisions:
    - app.state over module globals: one place to swap implementations per app instance
"""

from fastapi import Depends, Request

from patoapp.core.domain_types import Plan, Role
from patoapp.core.errors import (
    AuthenticationRequiredError, AuthStoreNotInitializedError, PermissionDeniedError,
)
from patoapp.schemas.user import User
from patoapp.services.auth_store import AuthStore
from patoapp.services.pato_repository import PatoRepository
from patoapp.services.subscription import SubscriptionService


def get_auth_store(request: Request) -> AuthStore:
    auth = getattr(request.app.state, "auth_store", None)
    if auth is None:
        raise AuthStoreNotInitializedError()
    return auth


def get_pato_repository(request: Request) -> PatoRepository:
    return request.app.state.pato_repository


def get_subscription_service(request: Request) -> SubscriptionService:
    return request.app.state.subscription_service


def require_user(auth: AuthStore = Depends(get_auth_store)) -> User:
    user = auth.user
    if user is None:
        raise AuthenticationRequiredError()
    return user


def require_admin(user: User = Depends(require_user)) -> User:
    if user.role != Role.ADMIN:
        raise PermissionDeniedError("Solo los administradores pueden gestionar el catálogo")
    return user


def require_paid_plan(user: User = Depends(require_user)) -> User:
    if user.plan != Plan.PAID:
        raise PermissionDeniedError(
            "Esta funcionalidad está disponible solo para usuarios Premium. "
            "¡Actualiza tu plan!",
        )
    return user
