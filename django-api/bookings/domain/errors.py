"""Domain error codes for the bookings module."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    TICKET_NOT_REGISTERED = "TICKET_NOT_REGISTERED"
    OUT_OF_QUOTA = "OUT_OF_QUOTA"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    EVENT_PASSED = "EVENT_PASSED"
    DUPLICATE_TICKET_CODE = "DUPLICATE_TICKET_CODE"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    LINE_NOT_FOUND = "LINE_NOT_FOUND"
    QUANTITY_EXCEEDS_BOOKED = "QUANTITY_EXCEEDS_BOOKED"
    INSUFFICIENT_QUOTA = "INSUFFICIENT_QUOTA"
    INVALID_BOOKING_ID = "INVALID_BOOKING_ID"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    VALIDATION_FAILED = "VALIDATION_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class TicketNotRegisteredError(DomainError):
    """Raised when a ticket code does not exist in the catalog."""

    def __init__(self, ticket_code: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_REGISTERED,
            message=f"Ticket code '{ticket_code}' is not registered.",
        )
        self.ticket_code = ticket_code


class OutOfQuotaError(DomainError):
    """Raised when a ticket has no remaining quota."""

    def __init__(self, ticket_code: str) -> None:
        super().__init__(
            code=ErrorCode.OUT_OF_QUOTA,
            message=f"Ticket code '{ticket_code}' is out of quota.",
        )
        self.ticket_code = ticket_code


class InvalidQuantityError(DomainError):
    """Raised when a requested quantity is below one."""

    def __init__(self, ticket_code: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_QUANTITY,
            message=f"Quantity for ticket code '{ticket_code}' must be at least 1.",
        )
        self.ticket_code = ticket_code


class QuotaExceededError(DomainError):
    """Raised when a requested quantity is larger than the remaining quota."""

    def __init__(self, ticket_code: str) -> None:
        super().__init__(
            code=ErrorCode.QUOTA_EXCEEDED,
            message=f"The quantity of ticket with code '{ticket_code}' exceeds the remaining quota.",
        )
        self.ticket_code = ticket_code


class AvailableQuotaExceededError(DomainError):
    """Raised when an edited line asks for more than the ticket's available quota."""

    def __init__(self, ticket_code: str) -> None:
        super().__init__(
            code=ErrorCode.QUOTA_EXCEEDED,
            message=f"Quantity for ticket code '{ticket_code}' exceeds the available quota.",
        )
        self.ticket_code = ticket_code


class EventPassedError(DomainError):
    """Raised when the ticket's event is not in the future."""

    def __init__(self, ticket_code: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_PASSED,
            message=f"Ticket code '{ticket_code}' cannot be booked as the event date has passed.",
        )
        self.ticket_code = ticket_code


class DuplicateTicketCodeError(DomainError):
    """Raised when one request names the same ticket code twice."""

    def __init__(self, ticket_code: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_TICKET_CODE,
            message=f"Ticket code '{ticket_code}' appears more than once in the request.",
        )
        self.ticket_code = ticket_code


class BookingNotFoundError(DomainError):
    """Raised when a booking header does not exist."""

    def __init__(self, booking_id: int) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message=f"BookedTicketId {booking_id} is not registered.",
        )
        self.booking_id = booking_id


class LineNotFoundError(DomainError):
    """Raised when a booking has no line for the given ticket code."""

    def __init__(self, booking_id: int, ticket_code: str) -> None:
        super().__init__(
            code=ErrorCode.LINE_NOT_FOUND,
            message=f"Ticket code '{ticket_code}' is not part of this booking.",
        )
        self.booking_id = booking_id
        self.ticket_code = ticket_code


class QuantityExceedsBookedError(DomainError):
    """Raised when revoking more tickets than the line holds."""

    def __init__(self, requested: int, booked: int) -> None:
        super().__init__(
            code=ErrorCode.QUANTITY_EXCEEDS_BOOKED,
            message=(
                f"The amount of tickets requested ({requested}) exceeds "
                f"the amount of booked tickets ({booked})."
            ),
        )
        self.requested = requested
        self.booked = booked


class InsufficientQuotaError(DomainError):
    """Raised by the inventory ledger when a reservation cannot be covered."""

    def __init__(self, ticket_code: str, quantity: int) -> None:
        super().__init__(
            code=ErrorCode.INSUFFICIENT_QUOTA,
            message=f"Not enough quota left to reserve {quantity} of ticket '{ticket_code}'.",
        )
        self.ticket_code = ticket_code
        self.quantity = quantity


class InvalidBookingIdError(DomainError):
    """Raised when a booking ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_BOOKING_ID,
            message="Invalid booking ID format",
        )


class TicketNotFoundError(DomainError):
    """Raised when a single-ticket lookup finds nothing."""

    def __init__(self, ticket_code: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="No ticket found based on the provided ticket code.",
        )
        self.ticket_code = ticket_code


class BookingValidationError(DomainError):
    """Raised when one or more requested lines fail validation.

    Carries every per-line message so the caller sees all problems at once.
    """

    def __init__(self, errors: Sequence[str]) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="One or more validation errors occurred.",
        )
        self.errors = tuple(errors)
