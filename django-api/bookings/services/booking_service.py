"""Booking service - all booking business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Every mutating call runs inside exactly one unit of work: validation reads
and all ledger and booking writes commit together or not at all.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime

from django.utils import timezone

from bookings.domain import (
    Booking,
    BookingId,
    BookingLine,
    CategorySummary,
    LineRequest,
    Money,
    Page,
    SummaryItem,
    Ticket,
    TicketCode,
    summarize_by_category,
)
from bookings.domain.errors import (
    BookingNotFoundError,
    BookingValidationError,
    InvalidBookingIdError,
    InvalidQuantityError,
    LineNotFoundError,
    QuantityExceedsBookedError,
)
from bookings.domain.validation import (
    error_messages,
    parse_code,
    validate_booking_lines,
    validate_update_lines,
)
from bookings.stores.interfaces import UnitOfWork

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookingReceipt:
    """Result of a successful booking."""

    booking_id: BookingId
    total_price: Money
    categories: list[CategorySummary]


@dataclass(frozen=True)
class BookingDetail:
    """A booking header with its lines grouped by category."""

    booking: Booking
    categories: list[CategorySummary]


@dataclass(frozen=True)
class LineView:
    """A booking line joined with its catalog entry."""

    ticket_code: str
    ticket_name: str | None
    category_name: str | None
    quantity: int


def _parse_booking_id(booking_id: str | int) -> BookingId:
    try:
        return BookingId.from_string(booking_id)
    except (TypeError, ValueError) as exc:
        raise InvalidBookingIdError() from exc


def _summary_items(lines: Sequence[BookingLine], tickets: dict[TicketCode, Ticket]) -> list[SummaryItem]:
    items = []
    for line in lines:
        ticket = tickets.get(line.ticket_code)
        items.append(
            SummaryItem(
                ticket_code=line.ticket_code.value,
                ticket_name=ticket.name if ticket else None,
                category_name=ticket.category_name if ticket else None,
                quantity=line.quantity,
                unit_price=line.unit_price.amount,
                event_date=ticket.event_date if ticket else None,
            )
        )
    return items


def _line_views(lines: Sequence[BookingLine], tickets: dict[TicketCode, Ticket]) -> list[LineView]:
    return [
        LineView(
            ticket_code=item.ticket_code,
            ticket_name=item.ticket_name,
            category_name=item.category_name,
            quantity=item.quantity,
        )
        for item in _summary_items(lines, tickets)
    ]


class BookingService:
    """Service for the booking lifecycle: book, inspect, revoke and update."""

    def __init__(
        self,
        unit_of_work: Callable[[], UnitOfWork],
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._unit_of_work = unit_of_work
        self._clock = clock

    def book(self, requests: Sequence[LineRequest]) -> BookingReceipt:
        """Book every requested line, or none of them.

        Raises:
            BookingValidationError: If any line fails validation. Carries one
                message per failing line; nothing is written.
            InsufficientQuotaError: If a concurrent booking took the quota
                between validation and reservation. Nothing is written.
        """
        logger.info("Received booking request for %d ticket lines", len(requests))
        with self._unit_of_work() as uow:
            codes = {code for code in map(parse_code, requests) if code is not None}
            tickets = uow.catalog.get_tickets(codes)
            verdicts = validate_booking_lines(requests, tickets, self._clock())
            errors = error_messages(verdicts)
            if errors:
                logger.warning("Booking validation failed: %d errors found", len(errors))
                raise BookingValidationError(errors)

            booking_id = uow.bookings.create_booking()
            lines = []
            for request in requests:
                ticket = tickets[request.code]
                subtotal = ticket.price * request.quantity
                lines.append(uow.bookings.add_line(booking_id, ticket.code, request.quantity, subtotal))
                uow.ledger.reserve(ticket.code, request.quantity)
            total = uow.bookings.refresh_total(booking_id)

        logger.info("Booking %s completed, total price %s", booking_id, total)
        return BookingReceipt(
            booking_id=booking_id,
            total_price=total,
            categories=summarize_by_category(_summary_items(lines, tickets), with_subtotal=True),
        )

    def get_booking(self, booking_id: str | int) -> BookingDetail:
        """Return a booking with its lines grouped by category.

        Raises:
            InvalidBookingIdError: If the booking_id is not a positive integer.
            BookingNotFoundError: If the booking does not exist.
        """
        parsed = _parse_booking_id(booking_id)
        with self._unit_of_work() as uow:
            booking = uow.bookings.get_booking(parsed)
            if booking is None:
                logger.warning("Booking %s not found", parsed)
                raise BookingNotFoundError(parsed.value)
            tickets = uow.catalog.get_tickets(line.ticket_code for line in booking.lines)

        return BookingDetail(
            booking=booking,
            categories=summarize_by_category(_summary_items(booking.lines, tickets)),
        )

    def list_bookings(self, page_number: int, page_size: int) -> Page[BookingDetail]:
        """Return a page of bookings, each with its lines grouped by category."""
        with self._unit_of_work() as uow:
            page = uow.bookings.list_bookings(page_number, page_size)
            tickets = uow.catalog.get_tickets(
                line.ticket_code for booking in page.items for line in booking.lines
            )

        return Page(
            items=tuple(
                BookingDetail(
                    booking=booking,
                    categories=summarize_by_category(_summary_items(booking.lines, tickets)),
                )
                for booking in page.items
            ),
            total=page.total,
            page_number=page.page_number,
            page_size=page.page_size,
        )

    def revoke(self, booking_id: str | int, ticket_code: str, quantity: int) -> list[LineView]:
        """Give back ``quantity`` tickets of one line of a booking.

        A line revoked down to zero is removed, and a booking left without
        lines is removed with it. If the line's ticket has left the catalog
        there is no quota to give back, so only the booking changes.

        Returns:
            The lines remaining on the booking; empty if it was removed.

        Raises:
            InvalidBookingIdError: If the booking_id is not a positive integer.
            BookingNotFoundError: If the booking does not exist.
            LineNotFoundError: If the booking has no line for ``ticket_code``.
            InvalidQuantityError: If ``quantity`` is below one.
            QuantityExceedsBookedError: If ``quantity`` exceeds the line's quantity.
        """
        parsed = _parse_booking_id(booking_id)
        logger.info(
            "Revoking %d of ticket %s from booking %s", quantity, ticket_code, parsed
        )
        with self._unit_of_work() as uow:
            booking = uow.bookings.get_booking(parsed, for_update=True)
            if booking is None:
                logger.warning("Booking %s not found", parsed)
                raise BookingNotFoundError(parsed.value)

            line = booking.line_for(TicketCode(ticket_code)) if ticket_code.strip() else None
            if line is None:
                logger.warning("Ticket %s is not part of booking %s", ticket_code, parsed)
                raise LineNotFoundError(parsed.value, ticket_code)
            if quantity < 1:
                raise InvalidQuantityError(ticket_code)
            if quantity > line.quantity:
                logger.warning(
                    "Revoke of %d exceeds the %d booked for ticket %s", quantity, line.quantity, line.ticket_code
                )
                raise QuantityExceedsBookedError(quantity, line.quantity)

            if line.ticket_code in uow.catalog.get_tickets([line.ticket_code]):
                uow.ledger.release(line.ticket_code, quantity)
            else:
                logger.warning(
                    "Ticket %s is no longer in the catalog, revoking from booking %s without releasing quota",
                    line.ticket_code,
                    parsed,
                )
            remaining = line.quantity - quantity
            if remaining == 0:
                uow.bookings.delete_line(line)
                logger.info("Removed ticket %s from booking %s", line.ticket_code, parsed)
            else:
                uow.bookings.change_line(line, remaining, line.unit_price * remaining)
            uow.bookings.refresh_total(parsed)

            after = uow.bookings.get_booking(parsed)
            if not after.lines:
                uow.bookings.delete_booking(parsed)
                logger.info("Removed booking %s because all tickets have been revoked", parsed)
                return []
            tickets = uow.catalog.get_tickets(remaining_line.ticket_code for remaining_line in after.lines)

        return _line_views(after.lines, tickets)

    def update(self, booking_id: str | int, requests: Sequence[LineRequest]) -> list[CategorySummary]:
        """Replace the quantities of existing booking lines.

        Returns:
            The updated lines grouped by category.

        Raises:
            InvalidBookingIdError: If the booking_id is not a positive integer.
            BookingNotFoundError: If the booking does not exist.
            BookingValidationError: If any requested line fails validation.
                Nothing is written.
            InsufficientQuotaError: If a concurrent booking took the quota
                needed for an increase. Nothing is written.
        """
        parsed = _parse_booking_id(booking_id)
        logger.info("Updating %d ticket lines of booking %s", len(requests), parsed)
        with self._unit_of_work() as uow:
            booking = uow.bookings.get_booking(parsed, for_update=True)
            if booking is None:
                logger.warning("Booking %s not found", parsed)
                raise BookingNotFoundError(parsed.value)

            codes = {code for code in map(parse_code, requests) if code is not None}
            tickets = uow.catalog.get_tickets(codes)
            verdicts = validate_update_lines(booking, requests, tickets)
            errors = error_messages(verdicts)
            if errors:
                logger.warning("Validation errors occurred while updating booking %s", parsed)
                raise BookingValidationError(errors)

            updated = []
            for request in requests:
                line = booking.line_for(request.code)
                ticket = tickets[line.ticket_code]
                delta = request.quantity - line.quantity
                if delta >= 0:
                    uow.ledger.reserve(line.ticket_code, delta)
                else:
                    uow.ledger.release(line.ticket_code, -delta)
                updated.append(uow.bookings.change_line(line, request.quantity, ticket.price * request.quantity))
            total = uow.bookings.refresh_total(parsed)

        logger.info("Booking %s updated, total price %s", parsed, total)
        return summarize_by_category(_summary_items(updated, tickets))
