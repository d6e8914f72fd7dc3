"""Domain errors raised by services and rendered by the handler in app.main."""
from typing import Optional


class AppError(Exception):
    code = "app_error"
    status_code = 500

    def __init__(self, message: str, *, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code


class Unauthenticated(AppError):
    code = "unauthenticated"
    status_code = 401


class Forbidden(AppError):
    code = "forbidden"
    status_code = 403


class NotFound(AppError):
    code = "not_found"
    status_code = 404


class ProfileNotFound(NotFound):
    code = "profile_not_found"


class PlanNotFound(NotFound):
    code = "plan_not_found"


class ValidationError(AppError, ValueError):
    code = "validation_error"
    status_code = 400


class InvalidField(ValidationError):
    code = "invalid_field"


class InvalidValue(ValidationError):
    code = "invalid_value"


class BackendError(AppError):
    """Persistence or provider failure; carries the underlying message."""
    code = "backend_error"
    status_code = 500
