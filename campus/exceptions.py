"""Domain errors raised by the admission and booking services."""
from __future__ import annotations


class CampusError(Exception):
    """Base class for rejections that map onto a client-facing response."""

    status_code = 400
    code = "error"
    default_message = "Request could not be processed."

    def __init__(self, message: str | None = None, **details):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def as_payload(self) -> dict:
        payload = {"code": self.code, "message": self.message}
        payload.update(self.details)
        return payload


class RequestValidationError(CampusError):
    code = "validation-error"
    default_message = "Missing or malformed fields."

    def __init__(self, errors: dict | None = None, message: str | None = None):
        super().__init__(message, errors=errors or {})


class NotFound(CampusError):
    status_code = 404
    code = "not-found"
    default_message = "Record not found."


class Duplicate(CampusError):
    status_code = 409
    code = "duplicate"
    default_message = "Record already exists."


class LimitExceeded(CampusError):
    status_code = 409
    code = "limit-exceeded"

    COURSE_COUNT = "course-count"
    CREDIT_SUM = "credit-sum"

    def __init__(self, reason: str, message: str | None = None):
        self.reason = reason
        super().__init__(message or f"Enrollment limit exceeded ({reason}).", reason=reason)


class Conflict(CampusError):
    status_code = 409
    code = "conflict"
    default_message = "Time slot is already booked."
