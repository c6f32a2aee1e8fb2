"""Catalog service - read-only ticket listings."""

import logging

from bookings.domain import CategorySummary, Page, SummaryItem, Ticket, TicketCode, summarize_by_category
from bookings.domain.errors import TicketNotFoundError
from bookings.stores.interfaces import TicketCatalog, TicketQuery

logger = logging.getLogger(__name__)


class CatalogService:
    """Service for ticket catalog lookups."""

    def __init__(self, catalog: TicketCatalog) -> None:
        self._catalog = catalog

    def search_available(self, query: TicketQuery) -> Page[Ticket]:
        """Return a page of tickets with quota left that match ``query``."""
        page = self._catalog.search_available(query)
        logger.info("Retrieved %d of %d available tickets", len(page.items), page.total)
        return page

    def available_by_category(self) -> list[CategorySummary]:
        """Return every ticket with quota left, grouped by category.

        Each summary item carries the ticket's remaining quota as its quantity.
        """
        tickets = self._catalog.list_available()
        return summarize_by_category(
            SummaryItem(
                ticket_code=ticket.code.value,
                ticket_name=ticket.name,
                category_name=ticket.category_name,
                quantity=ticket.quota.value,
                unit_price=ticket.price.amount,
                event_date=ticket.event_date,
            )
            for ticket in tickets
        )

    def get_ticket(self, ticket_code: str) -> Ticket:
        """Return a ticket by code.

        Raises:
            TicketNotFoundError: If the code is blank or unknown.
        """
        try:
            code = TicketCode(ticket_code)
        except ValueError as exc:
            raise TicketNotFoundError(ticket_code) from exc

        ticket = self._catalog.get_ticket(code)
        if ticket is None:
            logger.warning("Ticket %s not found", code)
            raise TicketNotFoundError(ticket_code)
        return ticket
