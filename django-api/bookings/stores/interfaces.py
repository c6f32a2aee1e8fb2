"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. A ``UnitOfWork`` groups
the stores used by one service call so that every change made through them
commits or rolls back together.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from types import TracebackType
from typing import Self

from bookings.domain import Booking, BookingId, BookingLine, Money, Page, Ticket, TicketCode

TICKET_ORDERINGS = ("category_name", "event_date", "price", "ticket_code", "ticket_name")


@dataclass(frozen=True)
class TicketQuery:
    """Filters, ordering and paging for catalog listings.

    The three text filters are substring matches combined with OR.
    """

    category_name: str | None = None
    ticket_code: str | None = None
    ticket_name: str | None = None
    max_price: int | None = None
    min_event_date: datetime | None = None
    max_event_date: datetime | None = None
    order_by: str = "ticket_code"
    descending: bool = False
    page_number: int = 1
    page_size: int = 10


class TicketCatalog(ABC):
    """Read access to the ticket catalog."""

    @abstractmethod
    def get_tickets(self, codes: Iterable[TicketCode]) -> dict[TicketCode, Ticket]:
        """Return the tickets that exist among ``codes``, keyed by code."""
        ...

    @abstractmethod
    def get_ticket(self, code: TicketCode) -> Ticket | None:
        """Return a ticket by code, or None if not found."""
        ...

    @abstractmethod
    def search_available(self, query: TicketQuery) -> Page[Ticket]:
        """Return a page of tickets with quota left that match ``query``."""
        ...

    @abstractmethod
    def list_available(self) -> list[Ticket]:
        """Return all tickets with quota left, ordered by category then code."""
        ...


class InventoryLedger(ABC):
    """Owner of the ticket quota counters."""

    @abstractmethod
    def reserve(self, code: TicketCode, quantity: int) -> None:
        """Take ``quantity`` from the ticket's quota.

        Raises:
            InsufficientQuotaError: If the quota is smaller than ``quantity``.
            TicketNotRegisteredError: If the ticket does not exist.
        """
        ...

    @abstractmethod
    def release(self, code: TicketCode, quantity: int) -> None:
        """Give ``quantity`` back to the ticket's quota.

        Raises:
            TicketNotRegisteredError: If the ticket does not exist.
        """
        ...


class BookingStore(ABC):
    """Interface for booking header and line persistence."""

    @abstractmethod
    def get_booking(self, booking_id: BookingId, *, for_update: bool = False) -> Booking | None:
        """Return a booking with its lines, or None if not found.

        ``for_update`` locks the header until the unit of work ends.
        """
        ...

    @abstractmethod
    def list_bookings(self, page_number: int, page_size: int) -> Page[Booking]:
        """Return a page of bookings ordered by id ascending."""
        ...

    @abstractmethod
    def create_booking(self) -> BookingId:
        """Create an empty header with a zero total and return its id."""
        ...

    @abstractmethod
    def add_line(self, booking_id: BookingId, code: TicketCode, quantity: int, subtotal: Money) -> BookingLine:
        """Attach a new line to a booking."""
        ...

    @abstractmethod
    def change_line(self, line: BookingLine, quantity: int, subtotal: Money) -> BookingLine:
        """Overwrite a line's quantity and subtotal."""
        ...

    @abstractmethod
    def delete_line(self, line: BookingLine) -> None:
        """Remove a line."""
        ...

    @abstractmethod
    def delete_booking(self, booking_id: BookingId) -> None:
        """Remove a header and any lines it still owns."""
        ...

    @abstractmethod
    def refresh_total(self, booking_id: BookingId) -> Money:
        """Set the header total to the sum of its line subtotals and return it."""
        ...


class UnitOfWork(ABC):
    """One atomic unit of work over the catalog, ledger and booking stores.

    Leaving the context normally commits; leaving it with an exception rolls
    every change back.
    """

    catalog: TicketCatalog
    ledger: InventoryLedger
    bookings: BookingStore

    def __enter__(self) -> Self:
        self._begin()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            self._commit()
        else:
            self._rollback(exc_type, exc, tb)

    @abstractmethod
    def _begin(self) -> None: ...

    @abstractmethod
    def _commit(self) -> None: ...

    @abstractmethod
    def _rollback(
        self,
        exc_type: type[BaseException],
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...
