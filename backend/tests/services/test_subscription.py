"""Subscription Service — simulated checkout and plan upgrade."""

import pytest

from patoapp.core.domain_types import PaymentMethod, Plan
from patoapp.core.errors import AuthenticationRequiredError
from patoapp.services.subscription import SubscriptionService

VALID_CARD = {"number": "4111111111111111", "name": "MARIA GONZALEZ", "expiry": "12/29", "cvv": "123"}


@pytest.fixture
async def maria(auth):
    await auth.login("maria@example.com", "123456")
    return auth


async def test_checkout_requires_session(auth):
    service = SubscriptionService(auth, delay_seconds=0)
    with pytest.raises(AuthenticationRequiredError):
        await service.checkout(PaymentMethod.CARD, VALID_CARD)


async def test_invalid_card_returns_errors_and_keeps_plan(maria):
    service = SubscriptionService(maria, delay_seconds=0)
    errors = await service.checkout(PaymentMethod.CARD, {"number": "4111"})
    assert set(errors) == {"name", "expiry", "cvv"}
    assert maria.user.plan == Plan.FREE


async def test_card_checkout_upgrades_plan(maria):
    service = SubscriptionService(maria, delay_seconds=0)
    assert await service.checkout(PaymentMethod.CARD, VALID_CARD) == {}
    assert maria.user.plan == Plan.PAID


async def test_mercadopago_skips_card_validation(maria):
    service = SubscriptionService(maria, delay_seconds=0)
    assert await service.checkout(PaymentMethod.MERCADOPAGO) == {}
    assert maria.user.plan == Plan.PAID


async def test_checkout_waits_fixed_delay(maria, monkeypatch):
    waits = []

    async def fake_sleep(seconds):
        waits.append(seconds)

    monkeypatch.setattr("patoapp.services.subscription.asyncio.sleep", fake_sleep)
    service = SubscriptionService(maria, delay_seconds=2.0)
    await service.checkout(PaymentMethod.MERCADOPAGO)
    assert waits == [2.0]


async def test_rejected_card_does_not_wait(maria, monkeypatch):
    waits = []

    async def fake_sleep(seconds):
        waits.append(seconds)

    monkeypatch.setattr("patoapp.services.subscription.asyncio.sleep", fake_sleep)
    service = SubscriptionService(maria, delay_seconds=2.0)
    await service.checkout(PaymentMethod.CARD, {})
    assert waits == []


async def test_logout_during_delay_aborts_upgrade(maria, monkeypatch):
    async def logout_while_waiting(seconds):
        await maria.logout()

    monkeypatch.setattr("patoapp.services.subscription.asyncio.sleep", logout_while_waiting)
    service = SubscriptionService(maria, delay_seconds=2.0)
    with pytest.raises(AuthenticationRequiredError):
        await service.checkout(PaymentMethod.MERCADOPAGO)
    assert maria.user is None
    assert all(u.plan == Plan.FREE for u in maria.users if u.email == "maria@example.com")


async def test_account_switch_during_delay_leaves_new_session_untouched(maria, monkeypatch):
    async def switch_while_waiting(seconds):
        await maria.logout()
        await maria.login("juan@example.com", "123456")

    monkeypatch.setattr("patoapp.services.subscription.asyncio.sleep", switch_while_waiting)
    juan_plan = next(u.plan for u in maria.users if u.email == "juan@example.com")
    service = SubscriptionService(maria, delay_seconds=2.0)
    with pytest.raises(AuthenticationRequiredError):
        await service.checkout(PaymentMethod.MERCADOPAGO)
    assert maria.user.email == "juan@example.com"
    assert maria.user.plan == juan_plan
    stored_maria = next(u for u in maria.users if u.email == "maria@example.com")
    assert stored_maria.plan == Plan.FREE
