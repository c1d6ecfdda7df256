from .base import AppError, DomainError, InvalidInputError
from .http import handle_app_error, register_error_handler
from .validation import invalid_input, unwrap_or_raise, validate_payload

__all__ = [
    "AppError",
    "DomainError",
    "InvalidInputError",
    "handle_app_error",
    "invalid_input",
    "register_error_handler",
    "unwrap_or_raise",
    "validate_payload",
]
