"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PatoId and UserId wrap str — identifiers are opaque, never parsed
    - Role and Plan are closed sets — no raw string matching in services
    - Storage keys are defined once here and nowhere else

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (stored documents are JSON)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PatoId = NewType("PatoId", str)
UserId = NewType("UserId", str)


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Account role — admin unlocks catalog mutations."""
    USER = "user"
    ADMIN = "admin"


class Plan(str, Enum):
    """Subscription plan — paid unlocks sound playback."""
    FREE = "free"
    PAID = "paid"


class PaymentMethod(str, Enum):
    """Simulated checkout methods."""
    CARD = "card"
    MERCADOPAGO = "mercadopago"


# ─── Storage Keys ────────────────────────────────────────────────

PATOS_KEY = "patoapp_patos"
SESSION_KEY = "patoapp_user"
ROSTER_KEY = "patoapp_users"


# ─── Limits ──────────────────────────────────────────────────────

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6
MAX_CARD_NAME_LENGTH = 30
