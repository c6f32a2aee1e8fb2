"""Booking validator.

Evaluates every requested line against the catalog and produces one verdict
per line. Nothing here touches storage: callers load the tickets, ask for
verdicts, and branch once on whether any verdict failed.
"""

from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime

from bookings.domain.errors import (
    AvailableQuotaExceededError,
    DomainError,
    DuplicateTicketCodeError,
    EventPassedError,
    InvalidQuantityError,
    LineNotFoundError,
    OutOfQuotaError,
    QuotaExceededError,
    TicketNotRegisteredError,
)
from bookings.domain.models import Booking, LineRequest, Ticket
from bookings.domain.value_objects import TicketCode


@dataclass(frozen=True)
class LineVerdict:
    """Outcome of validating a single requested line."""

    request: LineRequest
    error: DomainError | None = None

    @property
    def accepted(self) -> bool:
        return self.error is None


def rejected(verdicts: Sequence[LineVerdict]) -> list[LineVerdict]:
    """Return the failing verdicts, in request order."""
    return [verdict for verdict in verdicts if not verdict.accepted]


def error_messages(verdicts: Sequence[LineVerdict]) -> list[str]:
    """Return one human-readable message per failing line."""
    return [verdict.error.message for verdict in rejected(verdicts)]


def parse_code(request: LineRequest) -> TicketCode | None:
    """Return the request's ticket code, or None if it is blank."""
    try:
        return request.code
    except ValueError:
        return None


def _duplicated_codes(requests: Sequence[LineRequest]) -> set[TicketCode]:
    counts = Counter(code for code in map(parse_code, requests) if code is not None)
    return {code for code, count in counts.items() if count > 1}


def check_booking_line(request: LineRequest, ticket: Ticket | None, now: datetime) -> DomainError | None:
    """Apply the booking rules to one line; the first failing rule wins."""
    if ticket is None:
        return TicketNotRegisteredError(request.ticket_code)
    if ticket.quota.value <= 0:
        return OutOfQuotaError(request.ticket_code)
    if request.quantity < 1:
        return InvalidQuantityError(request.ticket_code)
    if request.quantity > ticket.quota.value:
        return QuotaExceededError(request.ticket_code)
    if ticket.event_date <= now:
        return EventPassedError(request.ticket_code)
    return None


def validate_booking_lines(
    requests: Sequence[LineRequest],
    tickets: Mapping[TicketCode, Ticket],
    now: datetime,
) -> list[LineVerdict]:
    """Validate the lines of a new booking.

    Every line is evaluated independently. A ticket code that appears more
    than once in the same request is rejected on each occurrence, because a
    booking holds at most one line per ticket.

    Args:
        requests: The requested lines, in request order.
        tickets: Catalog entries for the requested codes that exist.
        now: The validation timestamp; events must start strictly after it.

    Returns:
        One verdict per requested line, in request order.
    """
    duplicates = _duplicated_codes(requests)
    verdicts = []
    for request in requests:
        code = parse_code(request)
        if code in duplicates:
            error = DuplicateTicketCodeError(request.ticket_code)
        else:
            ticket = tickets.get(code) if code is not None else None
            error = check_booking_line(request, ticket, now)
        verdicts.append(LineVerdict(request=request, error=error))
    return verdicts


def validate_update_lines(
    booking: Booking,
    requests: Sequence[LineRequest],
    tickets: Mapping[TicketCode, Ticket],
) -> list[LineVerdict]:
    """Validate quantity edits against an existing booking.

    The quota rule compares the new quantity with the ticket's remaining
    quota as it stands, without adding back what this line already holds.
    """
    duplicates = _duplicated_codes(requests)
    verdicts = []
    for request in requests:
        code = parse_code(request)
        line = booking.line_for(code) if code is not None else None
        ticket = tickets.get(code) if code is not None else None
        if code in duplicates:
            error = DuplicateTicketCodeError(request.ticket_code)
        elif line is None:
            error = LineNotFoundError(booking.id.value, request.ticket_code)
        elif ticket is None:
            error = TicketNotRegisteredError(request.ticket_code)
        elif request.quantity > ticket.quota.value:
            error = AvailableQuotaExceededError(request.ticket_code)
        elif request.quantity < 1:
            error = InvalidQuantityError(request.ticket_code)
        else:
            error = None
        verdicts.append(LineVerdict(request=request, error=error))
    return verdicts
