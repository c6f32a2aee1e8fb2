"""Tests for the ticket catalog endpoints.

Run with: pytest tests/test_ticket_catalog.py -v
"""

from datetime import timedelta

import pytest
from django.utils import timezone


@pytest.mark.django_db
class TestTicketList:
    """Tests for GET /api/tickets"""

    def test_lists_only_tickets_with_quota(self, api_client, make_ticket):
        make_ticket("T1", quota=5)
        make_ticket("T2", quota=0)

        response = api_client.get("/api/tickets")

        assert response.status_code == 200
        data = response.json()
        assert [ticket["ticket_code"] for ticket in data["tickets"]] == ["T1"]
        assert data["total_tickets"] == 1
        assert data["page_number"] == 1
        assert data["items_per_page"] == 10

    def test_empty_catalog_returns_empty_list(self, api_client, db):
        response = api_client.get("/api/tickets")

        assert response.status_code == 200
        assert response.json()["tickets"] == []

    def test_text_filters_are_combined_with_or(self, api_client, make_ticket):
        make_ticket("C1", category="Concert", name="Jazz night")
        make_ticket("S1", category="Sport", name="Derby")
        make_ticket("M1", category="Movie", name="Premiere")

        response = api_client.get("/api/tickets", {"category_name": "conc", "ticket_name": "derb"})

        assert [ticket["ticket_code"] for ticket in response.json()["tickets"]] == ["C1", "S1"]

    def test_max_price_and_date_range(self, api_client, make_ticket):
        soon = timezone.now() + timedelta(days=2)
        later = timezone.now() + timedelta(days=60)
        make_ticket("A", price=50, event_date=soon)
        make_ticket("B", price=500, event_date=soon)
        make_ticket("C", price=50, event_date=later)

        response = api_client.get(
            "/api/tickets",
            {"max_price": 100, "max_event_date": (timezone.now() + timedelta(days=10)).isoformat()},
        )

        assert [ticket["ticket_code"] for ticket in response.json()["tickets"]] == ["A"]

    def test_orders_and_pages(self, api_client, make_ticket):
        for code, price in [("A", 30), ("B", 10), ("C", 20)]:
            make_ticket(code, price=price)

        response = api_client.get(
            "/api/tickets", {"order_by": "price", "order_state": "desc", "tickets_per_page": 2, "page_number": 1}
        )

        data = response.json()
        assert [ticket["ticket_code"] for ticket in data["tickets"]] == ["A", "C"]
        assert data["total_tickets"] == 3

    def test_unknown_ordering_is_rejected(self, api_client, db):
        response = api_client.get("/api/tickets", {"order_by": "quota"})

        assert response.status_code == 400

    def test_page_size_above_limit_is_rejected(self, api_client, db):
        response = api_client.get("/api/tickets", {"tickets_per_page": 101})

        assert response.status_code == 400


@pytest.mark.django_db
class TestTicketsByCategory:
    """Tests for GET /api/tickets/by-category"""

    def test_groups_available_tickets(self, api_client, make_ticket):
        make_ticket("S1", category="Sport", quota=4)
        make_ticket("C1", category="Concert", quota=2)
        make_ticket("C2", category="Concert", quota=0)

        response = api_client.get("/api/tickets/by-category")

        assert response.status_code == 200
        categories = response.json()["categories"]
        assert [category["category_name"] for category in categories] == ["Concert", "Sport"]
        assert categories[0]["tickets"] == [
            {
                "ticket_code": "C1",
                "ticket_name": "Ticket C1",
                "event_date": categories[0]["tickets"][0]["event_date"],
                "price": 100,
                "quota": 2,
            }
        ]


@pytest.mark.django_db
class TestTicketDetail:
    """Tests for GET /api/tickets/{ticket_code}"""

    def test_returns_ticket_regardless_of_case(self, api_client, make_ticket):
        make_ticket("T1", quota=7, price=250)

        response = api_client.get("/api/tickets/t1")

        assert response.status_code == 200
        data = response.json()
        assert data["ticket_code"] == "T1"
        assert (data["price"], data["quota"], data["category_name"]) == (250, 7, "Concert")

    def test_unknown_code_returns_404(self, api_client, db):
        response = api_client.get("/api/tickets/NOPE")

        assert response.status_code == 404
        assert response.json()["code"] == "TICKET_NOT_FOUND"
