"""Error Hierarchy — typed, categorized exceptions for all PatoApp failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages
    - Repository and auth store never raise these for data-layer reasons;
      routes raise them after inspecting boolean/None results
    - AuthStoreNotInitializedError is the only error the auth store raises itself

Design Decisions:
    - Single hierarchy with PatoAppError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    STORAGE = "storage"
    MISUSE = "misuse"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    pato_id: str | None = None
    fields: dict[str, str] | None = None
    debug_info: dict[str, Any] | None = None


class PatoAppError(Exception):
    """Base exception for all PatoApp errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        error = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        if self.context.fields:
            error["fields"] = dict(self.context.fields)
        return {"error": error}


# ─── Domain Errors (400-level) ──────────────────────────────────

class FormValidationError(PatoAppError):
    """Form input failed field-level validation."""
    def __init__(self, fields: dict[str, str], context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.fields = fields
        super().__init__(
            f"Invalid fields: {', '.join(sorted(fields))}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.fields = fields


class AuthenticationRequiredError(PatoAppError):
    """Operation needs an active session."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Authentication required",
            "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class InvalidCredentialsError(PatoAppError):
    """Login attempt did not match any account."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Email o contraseña incorrectos",
            "INVALID_CREDENTIALS", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class PermissionDeniedError(PatoAppError):
    """Active session lacks the role or plan for the operation."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            reason, "PERMISSION_DENIED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class DuplicateAccountError(PatoAppError):
    """Registration collided with an existing email or username."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "El email o nombre de usuario ya están en uso",
            "DUPLICATE_ACCOUNT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class ResourceNotFoundError(PatoAppError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(PatoAppError):
    """Key-value store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class AuthStoreNotInitializedError(PatoAppError):
    """Auth store used before initialize() — a programming error."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "AuthStore used before initialize() (used outside provider)",
            "AUTH_STORE_NOT_INITIALIZED", ErrorCategory.MISUSE,
            ErrorSeverity.CRITICAL, context, 500,
        )
