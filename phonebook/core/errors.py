"""Domain error taxonomy mapped to HTTP responses by the app factory."""

from __future__ import annotations


class PhonebookError(Exception):
    """Base class for errors that carry a stable error code and status."""

    code = "unexpected_error"
    status_code = 500

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.code)


class ValidationError(PhonebookError):
    code = "validation_error"
    status_code = 400


class InvalidPhoneNumber(ValidationError):
    code = "invalid_phone_number"


class InvalidPhoneNumberForRegion(ValidationError):
    code = "invalid_phone_number_for_region"


class NotFoundError(PhonebookError):
    code = "not_found"
    status_code = 404


class AttemptNotFound(NotFoundError):
    code = "attempt_not_found"


class UserNotFound(NotFoundError):
    code = "user_not_found"


class AuthError(PhonebookError):
    code = "unauthorized"
    status_code = 401


class StoreError(PhonebookError):
    code = "store_error"
    status_code = 500


__all__ = [
    "PhonebookError",
    "ValidationError",
    "InvalidPhoneNumber",
    "InvalidPhoneNumberForRegion",
    "NotFoundError",
    "AttemptNotFound",
    "UserNotFound",
    "AuthError",
    "StoreError",
]
