from bookings.handlers.views import (
    BookingDetailView,
    BookingListView,
    BookingRevokeView,
    TicketDetailView,
    TicketListView,
    TicketsByCategoryView,
)

__all__ = [
    "BookingDetailView",
    "BookingListView",
    "BookingRevokeView",
    "TicketDetailView",
    "TicketListView",
    "TicketsByCategoryView",
]
