"""User Schemas — account records, registration input and API views.

Invariants:
    - User.role and User.plan are closed enums (Role, Plan)
    - registered_on is an ISO calendar date string (YYYY-MM-DD)
    - UserPublic never carries the password
"""

from pydantic import BaseModel, Field

from patoapp.core.domain_types import PaymentMethod, Plan, Role


class UserProfile(BaseModel):
    """Profile fields supplied at registration."""
    first_name: str
    last_name: str
    email: str
    username: str
    # ADR: plaintext, compared by exact match — known weakness, kept for parity
    password: str


class User(UserProfile):
    """Account as stored in the roster and session documents."""
    id: str = Field(min_length=1)
    role: Role = Role.USER
    plan: Plan = Plan.FREE
    registered_on: str


class UserPublic(BaseModel):
    """Account view returned by the API."""
    id: str
    first_name: str
    last_name: str
    email: str
    username: str
    role: Role
    plan: Plan
    registered_on: str

    @classmethod
    def from_user(cls, user: User) -> "UserPublic":
        return cls.model_validate(user.model_dump(exclude={"password"}))


class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(BaseModel):
    """Signup form — validated field-by-field by validate_registration."""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    username: str = ""
    password: str = ""
    confirm_password: str = ""
    accept_terms: bool = False

    def to_profile(self) -> UserProfile:
        return UserProfile(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            username=self.username,
            password=self.password,
        )


class PlanUpdate(BaseModel):
    plan: Plan


class CardDetails(BaseModel):
    number: str = ""
    name: str = ""
    expiry: str = ""
    cvv: str = ""


class CheckoutRequest(BaseModel):
    """Simulated checkout — card details only read for the card method."""
    method: PaymentMethod
    card: CardDetails | None = None
