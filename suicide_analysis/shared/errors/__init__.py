from .base import (
    AppError,
    DomainError,
    InfrastructureError,
    InvalidResourceIdError,
    MissingFieldsError,
    PasswordTooLongError,
    PasswordTooShortError,
    PersistenceError,
    RateLimitedError,
    TokenSigningError,
    UnauthorizedError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "InfrastructureError",
    "InvalidResourceIdError",
    "MissingFieldsError",
    "PasswordTooLongError",
    "PasswordTooShortError",
    "PersistenceError",
    "RateLimitedError",
    "TokenSigningError",
    "UnauthorizedError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
