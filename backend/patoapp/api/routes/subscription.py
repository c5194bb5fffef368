"""Subscription Routes — simulated checkout for the premium plan.

Invariants:
    - Anonymous checkout, or a logout before the payment completes → 401
    - Invalid card fields → 400 with field error map, plan unchanged
    - Success → 200 with the upgraded account
"""

import logging

from fastapi import APIRouter, Depends

from patoapp.api.dependencies import get_subscription_service, require_user
from patoapp.core.errors import AuthenticationRequiredError, FormValidationError
from patoapp.schemas.user import CheckoutRequest, UserPublic
from patoapp.services.subscription import SubscriptionService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/subscription", tags=["subscription"])


@router.post("/checkout", dependencies=[Depends(require_user)])
async def checkout(
    body: CheckoutRequest,
    service: SubscriptionService = Depends(get_subscription_service),
):
    card = body.card.model_dump() if body.card else None
    errors = await service.checkout(body.method, card)
    if errors:
        raise FormValidationError(errors)
    user = service.auth.user
    if user is None:
        raise AuthenticationRequiredError()
    return {
        "message": "¡Pago procesado exitosamente! Ahora tienes acceso Premium.",
        "user": UserPublic.from_user(user).model_dump(mode="json"),
    }
