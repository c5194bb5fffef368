"""Form Validation — field-keyed error maps for registration, checkout and catalog drafts.

Invariants:
    - Every validator returns dict[field, message]; empty dict means valid
    - Validators never raise on bad input and never touch storage
    - Messages are user-facing Spanish (the product's UI language)

Design Decisions:
    - Plain mappings in, error maps out: routes and tests call these without
      building pydantic models first
    - Email check is deliberately loose (something@something.tld), matching the
      signup form behaviour
"""

import re
from typing import Mapping

from patoapp.core.domain_types import (
    MAX_CARD_NAME_LENGTH, MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH,
)

_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.search(email))


def is_valid_password(password: str) -> bool:
    return len(password) >= MIN_PASSWORD_LENGTH


def _text(form: Mapping, key: str) -> str:
    value = form.get(key)
    return value if isinstance(value, str) else ""


def validate_registration(form: Mapping) -> dict[str, str]:
    """Validate the signup form (profile fields + confirmation + terms)."""
    errors: dict[str, str] = {}

    if not _text(form, "first_name").strip():
        errors["first_name"] = "El nombre es requerido"
    if not _text(form, "last_name").strip():
        errors["last_name"] = "El apellido es requerido"

    email = _text(form, "email")
    if not email.strip():
        errors["email"] = "El email es requerido"
    elif not is_valid_email(email):
        errors["email"] = "El email no es válido"

    username = _text(form, "username")
    if not username.strip():
        errors["username"] = "El nombre de usuario es requerido"
    elif len(username) < MIN_USERNAME_LENGTH:
        errors["username"] = "El usuario debe tener al menos 3 caracteres"

    password = _text(form, "password")
    if not password:
        errors["password"] = "La contraseña es requerida"
    elif not is_valid_password(password):
        errors["password"] = "La contraseña debe tener al menos 6 caracteres"

    if password != _text(form, "confirm_password"):
        errors["confirm_password"] = "Las contraseñas no coinciden"

    if not form.get("accept_terms"):
        errors["accept_terms"] = "Debes aceptar los términos y condiciones"

    return errors


def validate_card_payment(card: Mapping) -> dict[str, str]:
    """Validate card checkout fields — all required, holder name capped."""
    errors: dict[str, str] = {}
    for key, label in (
        ("number", "El número de tarjeta es requerido"),
        ("name", "El nombre del titular es requerido"),
        ("expiry", "La fecha de vencimiento es requerida"),
        ("cvv", "El código de seguridad es requerido"),
    ):
        if not _text(card, key).strip():
            errors[key] = label

    if len(_text(card, "name")) > MAX_CARD_NAME_LENGTH:
        errors["name"] = "El nombre no puede exceder los 30 caracteres"
    return errors


# image may stay empty; every other catalog field is required
_PATO_REQUIRED_FIELDS = {
    "name": "El nombre es requerido",
    "scientific_name": "El nombre científico es requerido",
    "group": "La especie es requerida",
    "description": "La descripción es requerida",
    "behavior": "El comportamiento es requerido",
    "habitat": "El hábitat es requerido",
    "plumage": "El plumaje es requerido",
    "diet": "La alimentación es requerida",
    "sound": "La URL de sonido es requerida",
}


def validate_pato_draft(draft: Mapping, partial: bool = False) -> dict[str, str]:
    """Validate the admin catalog form.

    With partial=True only the keys present in the draft are checked (PATCH).
    """
    errors: dict[str, str] = {}
    for key, message in _PATO_REQUIRED_FIELDS.items():
        if partial and key not in draft:
            continue
        if not _text(draft, key).strip():
            errors[key] = message
    return errors
