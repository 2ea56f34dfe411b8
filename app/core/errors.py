"""Application error taxonomy.

Every error raised by the service layer derives from :class:`AppError` and
carries the HTTP status and user-facing message it is rendered with. The
handlers registered in ``main.py`` turn them into ``{"detail": message}``
responses; anything else becomes a 500 with :data:`UNEXPECTED_ERROR_MESSAGE`.
"""

from typing import Optional

from fastapi import status

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."
CONFIGURATION_ERROR_MESSAGE = "Backend is not configured. Please check the service settings."

# Raw backend messages that get a friendlier replacement
FRIENDLY_MESSAGES = {
    "User already registered": "An account with this email already exists. Please sign in instead.",
    "Invalid login credentials": "Invalid email or password. Please check your credentials and try again.",
}


def friendly_message(raw: Optional[str], fallback: str = UNEXPECTED_ERROR_MESSAGE) -> str:
    """Map a raw backend error message to the text shown to users"""
    if not raw:
        return fallback
    for needle, replacement in FRIENDLY_MESSAGES.items():
        if needle in raw:
            return replacement
    return raw


class AppError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = UNEXPECTED_ERROR_MESSAGE

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(AppError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = CONFIGURATION_ERROR_MESSAGE

    def __init__(self, reason: Optional[str] = None):
        # The reason is for logs only, users always get the fixed message
        self.reason = reason
        super().__init__(CONFIGURATION_ERROR_MESSAGE)


class BackendError(AppError):
    """An error reported by the persistence or auth layer"""

    def __init__(self, raw_message: str, status_code: Optional[int] = None):
        self.raw_message = raw_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(friendly_message(raw_message))


class ValidationFailed(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class PermissionDeniedError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not enough permissions"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT


class InvalidStatusTransition(ConflictError):
    def __init__(self, entity: str, current: str, target: str):
        self.entity = entity
        self.current = current
        self.target = target
        super().__init__(f"Cannot move {entity} from '{current}' to '{target}'")


class QuotaExceededError(AppError):
    status_code = status.HTTP_402_PAYMENT_REQUIRED
