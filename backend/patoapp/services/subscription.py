"""Subscription Service — simulated checkout that upgrades the session's plan.

Invariants:
    - Checkout requires an authenticated session (AuthenticationRequiredError otherwise)
    - Card checkout with invalid fields returns the error map and changes nothing
    - A successful checkout waits the fixed delay, then sets plan=paid
    - A session that ends or switches accounts during the delay aborts the upgrade
      (AuthenticationRequiredError); no other account is touched
    - No real payment provider is contacted; there is no failure or retry path

Design Decisions:
    - Delay injected from settings: presentation pacing in prod, 0 in tests
    - Error map return (not exception) for card fields: mirrors form validation
"""

import asyncio
import logging
from typing import Mapping

from patoapp.core.domain_types import PaymentMethod, Plan
from patoapp.core.errors import AuthenticationRequiredError
from patoapp.core.validate_forms import validate_card_payment
from patoapp.services.auth_store import AuthStore

logger = logging.getLogger(__name__)


class SubscriptionService:
    """Simulated plan upgrade."""

    def __init__(self, auth: AuthStore, delay_seconds: float = 2.0):
        self.auth = auth
        self.delay_seconds = delay_seconds

    async def checkout(
        self, method: PaymentMethod, card: Mapping | None = None,
    ) -> dict[str, str]:
        user = self.auth.user
        if user is None:
            raise AuthenticationRequiredError()

        if method == PaymentMethod.CARD:
            errors = validate_card_payment(card or {})
            if errors:
                return errors

        logger.info(
            f"Processing simulated {method.value} payment",
            extra={"user_id": user.id},
        )
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        current = self.auth.user
        if current is None or current.id != user.id:
            logger.warning(
                "Session changed during checkout, plan left unchanged",
                extra={"user_id": user.id},
            )
            raise AuthenticationRequiredError()
        await self.auth.update_plan(Plan.PAID)
        return {}
