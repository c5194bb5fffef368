"""Auth Routes — login, registration, logout and plan changes for the single session.

Invariants:
    - Passwords never appear in responses (UserPublic)
    - Register: field error map → 400, duplicate email/username → 409, success → 201
    - Login failure → 401 and the session stays anonymous
    - Logout is idempotent (204 even when already anonymous)

Design Decisions:
    - One process-wide session (AuthStore) rather than per-client tokens: the
      service models a single kiosk-style visitor
    - The session is shared by every HTTP client: once anyone logs in, all clients
      act as that account, and the role and plan gates do not separate clients
"""

import logging

from fastapi import APIRouter, Depends, status

from patoapp.api.dependencies import get_auth_store, require_user
from patoapp.core.errors import (
    DuplicateAccountError, FormValidationError, InvalidCredentialsError,
)
from patoapp.core.validate_forms import validate_registration
from patoapp.schemas.user import (
    LoginRequest, PlanUpdate, RegisterRequest, User, UserPublic,
)
from patoapp.services.auth_store import AuthStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/login", response_model=UserPublic)
async def login(body: LoginRequest, auth: AuthStore = Depends(get_auth_store)):
    """Start a session for matching credentials."""
    if not await auth.login(body.email, body.password):
        raise InvalidCredentialsError()
    return UserPublic.from_user(auth.user)


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, auth: AuthStore = Depends(get_auth_store)):
    """Create an account. Does not log the new account in."""
    errors = validate_registration(body.model_dump())
    if errors:
        raise FormValidationError(errors)
    if not await auth.register(body.to_profile()):
        raise DuplicateAccountError()
    return {"message": "Cuenta creada exitosamente", "registered": True}


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(auth: AuthStore = Depends(get_auth_store)):
    await auth.logout()


@router.get("/me", response_model=UserPublic)
async def me(user: User = Depends(require_user)):
    return UserPublic.from_user(user)


@router.put(
    "/me/plan", response_model=UserPublic, dependencies=[Depends(require_user)],
)
async def update_plan(
    body: PlanUpdate,
    auth: AuthStore = Depends(get_auth_store),
):
    """Set the session's plan directly (checkout is the usual path to paid)."""
    await auth.update_plan(body.plan)
    return UserPublic.from_user(auth.user)
