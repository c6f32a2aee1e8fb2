from django.urls import path

from bookings.handlers import (
    BookingDetailView,
    BookingListView,
    BookingRevokeView,
    TicketDetailView,
    TicketListView,
    TicketsByCategoryView,
)

urlpatterns = [
    path("tickets", TicketListView.as_view(), name="ticket-list"),
    path("tickets/by-category", TicketsByCategoryView.as_view(), name="tickets-by-category"),
    path("tickets/<str:ticket_code>", TicketDetailView.as_view(), name="ticket-detail"),
    path("bookings", BookingListView.as_view(), name="booking-list"),
    path("bookings/<str:booking_id>", BookingDetailView.as_view(), name="booking-detail"),
    path(
        "bookings/<str:booking_id>/tickets/<str:ticket_code>/<int:quantity>",
        BookingRevokeView.as_view(),
        name="booking-revoke",
    ),
]
