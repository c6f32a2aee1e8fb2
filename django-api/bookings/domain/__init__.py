from bookings.domain.models import Booking, BookingLine, LineRequest, Page, Ticket
from bookings.domain.summary import CategorySummary, SummaryItem, summarize_by_category
from bookings.domain.value_objects import BookingId, Money, Quota, TicketCode

__all__ = [
    "Booking",
    "BookingLine",
    "LineRequest",
    "Page",
    "Ticket",
    "BookingId",
    "TicketCode",
    "Money",
    "Quota",
    "CategorySummary",
    "SummaryItem",
    "summarize_by_category",
]
