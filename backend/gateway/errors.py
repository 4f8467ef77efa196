from __future__ import annotations


class GatewayError(Exception):
    """Base class for failures talking to the alumni platform gateway."""


class TransportError(GatewayError):
    """Raised on network failures and non-2xx gateway responses."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(TransportError):
    """Raised when the gateway answers 404."""


class NotFoundOnDetailFetch(GatewayError):
    """Raised when a detail fetch returns no record to edit or view."""

    def __init__(self, resource: str, entity_id: str) -> None:
        super().__init__(f"{resource} record '{entity_id}' was not found")
        self.resource = resource
        self.entity_id = entity_id


__all__ = [
    "GatewayError",
    "NotFoundError",
    "NotFoundOnDetailFetch",
    "TransportError",
]
