"""Pytest configuration and shared fixtures."""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from bookings.models import Ticket, TicketCategory
from bookings.services.booking_service import BookingService
from bookings.stores.django_store import DjangoUnitOfWork


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_ticket(db):
    """Factory for catalog tickets; the event is a month away unless given."""

    def _make(
        code: str,
        *,
        quota: int = 10,
        price: int = 100,
        category: str = "Concert",
        name: str | None = None,
        event_date=None,
    ) -> Ticket:
        ticket_category, _ = TicketCategory.objects.get_or_create(name=category)
        return Ticket.objects.create(
            ticket_code=code,
            ticket_name=name or f"Ticket {code}",
            category=ticket_category,
            price=price,
            event_date=event_date or timezone.now() + timedelta(days=30),
            quota=quota,
        )

    return _make


@pytest.fixture
def booking_service() -> BookingService:
    return BookingService(unit_of_work=DjangoUnitOfWork)


@pytest.fixture
def quota_of(db):
    """Read a ticket's current quota straight from the database."""

    def _quota_of(code: str) -> int:
        return Ticket.objects.get(pk=code).quota

    return _quota_of
