"""Domain error codes for the hotels module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    NOT_FOUND = "NOT_FOUND"
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"


class NotFoundCause(Enum):
    """Which record was missing. Internal only, never sent to clients."""

    ENROLLMENT = "enrollment"
    TICKET = "ticket"
    EMPTY_CATALOG = "empty_catalog"
    HOTEL = "hotel"


class EntitlementFailure(Enum):
    """Which entitlement condition the ticket did not meet."""

    TICKET_NOT_PAID = "ticket_not_paid"
    REMOTE_TICKET = "remote_ticket"
    HOTEL_NOT_INCLUDED = "hotel_not_included"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """Raised when a record required to serve the request is absent."""

    def __init__(self, cause: NotFoundCause) -> None:
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message="No result for this search",
        )
        self.cause = cause


class PaymentRequiredError(DomainError):
    """Raised when the user's ticket does not entitle them to a hotel."""

    def __init__(self, reason: EntitlementFailure) -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_REQUIRED,
            message="Payment required to proceed",
        )
        self.reason = reason
