from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Error raised by a use case or repository that maps onto an HTTP response."""

    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details is not None:
            payload["details"] = dict(self.details)
        return payload


class NotFound(AppError):
    code = "not_found"
    status_code = 404


class ValidationError(AppError):
    code = "validation_error"
    status_code = 422


class BreedingNotAllowed(ValidationError):
    """Sow and boar failed the compatibility rules; `details["reason"]` says why."""

    code = "breeding_not_allowed"


class ConflictError(AppError):
    """Stale version on an optimistic update, or a farm-unique key already taken."""

    code = "conflict"
    status_code = 409


class InfrastructureError(AppError):
    """Storage failure the caller cannot correct by changing the request."""

    code = "infrastructure_error"
    status_code = 500
