"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in bookings/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar

from bookings.domain.value_objects import BookingId, Money, Quota, TicketCode

T = TypeVar("T")


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a sellable ticket."""

    code: TicketCode
    name: str
    category_name: str | None
    price: Money
    event_date: datetime
    quota: Quota


@dataclass(frozen=True)
class BookingLine:
    """One ticket-code entry within a booking."""

    id: int
    booking_id: BookingId
    ticket_code: TicketCode
    quantity: int
    subtotal_price: Money

    @property
    def unit_price(self) -> Money:
        """Price per ticket at the time the subtotal was last computed."""
        return Money(amount=self.subtotal_price.amount // self.quantity)


@dataclass(frozen=True)
class Booking:
    """Domain representation of a booking header and its lines."""

    id: BookingId
    total_price: Money
    created_at: datetime
    lines: tuple[BookingLine, ...] = ()

    def line_for(self, ticket_code: TicketCode) -> BookingLine | None:
        for line in self.lines:
            if line.ticket_code == ticket_code:
                return line
        return None


@dataclass(frozen=True)
class LineRequest:
    """A requested (ticket code, quantity) pair, as received from the caller."""

    ticket_code: str
    quantity: int

    @property
    def code(self) -> TicketCode:
        return TicketCode(self.ticket_code)


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a larger ordered result."""

    items: tuple[T, ...]
    total: int
    page_number: int
    page_size: int
