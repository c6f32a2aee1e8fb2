"""Django ORM implementation of the catalog, ledger and booking stores."""

import logging
from collections.abc import Iterable
from dataclasses import replace
from functools import partial
from types import TracebackType

from django.db import models, transaction

from bookings import models as orm
from bookings.cache import invalidate_catalog
from bookings.domain import Booking, BookingId, BookingLine, Money, Page, Quota, Ticket, TicketCode
from bookings.domain.errors import InsufficientQuotaError, TicketNotRegisteredError
from bookings.stores.interfaces import (
    BookingStore,
    InventoryLedger,
    TicketCatalog,
    TicketQuery,
    UnitOfWork,
)

logger = logging.getLogger(__name__)

ORDERING_FIELDS = {
    "ticket_code": "ticket_code",
    "ticket_name": "ticket_name",
    "category_name": "category__name",
    "price": "price",
    "event_date": "event_date",
}


def _to_ticket(row: orm.Ticket) -> Ticket:
    return Ticket(
        code=TicketCode(row.ticket_code),
        name=row.ticket_name,
        category_name=row.category.name,
        price=Money(row.price),
        event_date=row.event_date,
        quota=Quota(row.quota),
    )


def _to_line(row: orm.BookedTicketDetail) -> BookingLine:
    return BookingLine(
        id=row.pk,
        booking_id=BookingId(row.booked_ticket_id),
        ticket_code=TicketCode(row.ticket_code),
        quantity=row.quantity,
        subtotal_price=Money(row.subtotal_price),
    )


def _to_booking(row: orm.BookedTicket, details: Iterable[orm.BookedTicketDetail]) -> Booking:
    return Booking(
        id=BookingId(row.pk),
        total_price=Money(row.total_price),
        created_at=row.created_at,
        lines=tuple(_to_line(detail) for detail in details),
    )


def _page_bounds(page_number: int, page_size: int) -> tuple[int, int]:
    offset = (page_number - 1) * page_size
    return offset, offset + page_size


class DjangoTicketCatalog(TicketCatalog):
    """Ticket catalog backed by the Django ORM."""

    def _tickets(self) -> models.QuerySet:
        return orm.Ticket.objects.select_related("category")

    def get_tickets(self, codes: Iterable[TicketCode]) -> dict[TicketCode, Ticket]:
        wanted = {code.value for code in codes}
        rows = self._tickets().filter(ticket_code__in=wanted)
        return {ticket.code: ticket for ticket in map(_to_ticket, rows)}

    def get_ticket(self, code: TicketCode) -> Ticket | None:
        row = self._tickets().filter(ticket_code=code.value).first()
        return _to_ticket(row) if row is not None else None

    def search_available(self, query: TicketQuery) -> Page[Ticket]:
        tickets = self._tickets().filter(quota__gt=0)

        text_filter = models.Q()
        if query.category_name:
            text_filter |= models.Q(category__name__icontains=query.category_name)
        if query.ticket_name:
            text_filter |= models.Q(ticket_name__icontains=query.ticket_name)
        if query.ticket_code:
            text_filter |= models.Q(ticket_code__icontains=query.ticket_code)
        tickets = tickets.filter(text_filter)

        if query.max_price is not None:
            tickets = tickets.filter(price__lte=query.max_price)
        if query.min_event_date is not None:
            tickets = tickets.filter(event_date__gte=query.min_event_date)
        if query.max_event_date is not None:
            tickets = tickets.filter(event_date__lte=query.max_event_date)

        field = ORDERING_FIELDS.get(query.order_by, "ticket_code")
        tickets = tickets.order_by(f"-{field}" if query.descending else field, "ticket_code")

        start, end = _page_bounds(query.page_number, query.page_size)
        return Page(
            items=tuple(_to_ticket(row) for row in tickets[start:end]),
            total=tickets.count(),
            page_number=query.page_number,
            page_size=query.page_size,
        )

    def list_available(self) -> list[Ticket]:
        rows = self._tickets().filter(quota__gt=0).order_by("category__name", "ticket_code")
        return [_to_ticket(row) for row in rows]


class DjangoInventoryLedger(InventoryLedger):
    """Quota counters adjusted with single conditional UPDATE statements."""

    def reserve(self, code: TicketCode, quantity: int) -> None:
        if quantity < 0:
            raise ValueError("Cannot reserve a negative quantity")
        if quantity == 0:
            return

        updated = orm.Ticket.objects.filter(
            ticket_code=code.value, quota__gte=quantity
        ).update(quota=models.F("quota") - quantity)
        if not updated:
            if not orm.Ticket.objects.filter(ticket_code=code.value).exists():
                raise TicketNotRegisteredError(code.value)
            raise InsufficientQuotaError(code.value, quantity)

        logger.info("Reserved %d of ticket %s", quantity, code)
        transaction.on_commit(partial(invalidate_catalog, code.value))

    def release(self, code: TicketCode, quantity: int) -> None:
        if quantity < 0:
            raise ValueError("Cannot release a negative quantity")
        if quantity == 0:
            return

        updated = orm.Ticket.objects.filter(ticket_code=code.value).update(
            quota=models.F("quota") + quantity
        )
        if not updated:
            raise TicketNotRegisteredError(code.value)

        logger.info("Released %d of ticket %s", quantity, code)
        transaction.on_commit(partial(invalidate_catalog, code.value))


class DjangoBookingStore(BookingStore):
    """Booking headers and lines backed by the Django ORM."""

    def get_booking(self, booking_id: BookingId, *, for_update: bool = False) -> Booking | None:
        headers = orm.BookedTicket.objects.all()
        if for_update:
            headers = headers.select_for_update()
        row = headers.filter(pk=booking_id.value).first()
        if row is None:
            return None
        return _to_booking(row, orm.BookedTicketDetail.objects.filter(booked_ticket_id=row.pk))

    def list_bookings(self, page_number: int, page_size: int) -> Page[Booking]:
        headers = orm.BookedTicket.objects.order_by("id")
        start, end = _page_bounds(page_number, page_size)
        rows = headers.prefetch_related("details")[start:end]
        return Page(
            items=tuple(_to_booking(row, row.details.all()) for row in rows),
            total=headers.count(),
            page_number=page_number,
            page_size=page_size,
        )

    def create_booking(self) -> BookingId:
        row = orm.BookedTicket.objects.create(total_price=0)
        return BookingId(row.pk)

    def add_line(self, booking_id: BookingId, code: TicketCode, quantity: int, subtotal: Money) -> BookingLine:
        row = orm.BookedTicketDetail.objects.create(
            booked_ticket_id=booking_id.value,
            ticket_code=code.value,
            quantity=quantity,
            subtotal_price=subtotal.amount,
        )
        return _to_line(row)

    def change_line(self, line: BookingLine, quantity: int, subtotal: Money) -> BookingLine:
        orm.BookedTicketDetail.objects.filter(pk=line.id).update(
            quantity=quantity, subtotal_price=subtotal.amount
        )
        return replace(line, quantity=quantity, subtotal_price=subtotal)

    def delete_line(self, line: BookingLine) -> None:
        orm.BookedTicketDetail.objects.filter(pk=line.id).delete()

    def delete_booking(self, booking_id: BookingId) -> None:
        orm.BookedTicket.objects.filter(pk=booking_id.value).delete()

    def refresh_total(self, booking_id: BookingId) -> Money:
        total = (
            orm.BookedTicketDetail.objects.filter(booked_ticket_id=booking_id.value)
            .aggregate(total=models.Sum("subtotal_price"))["total"]
            or 0
        )
        orm.BookedTicket.objects.filter(pk=booking_id.value).update(total_price=total)
        return Money(total)


class DjangoUnitOfWork(UnitOfWork):
    """Unit of work mapped onto one ``transaction.atomic`` block."""

    def __init__(self, using: str | None = None) -> None:
        self._using = using
        self._atomic: transaction.Atomic | None = None
        self.catalog = DjangoTicketCatalog()
        self.ledger = DjangoInventoryLedger()
        self.bookings = DjangoBookingStore()

    def _begin(self) -> None:
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()

    def _commit(self) -> None:
        self._atomic.__exit__(None, None, None)

    def _rollback(
        self,
        exc_type: type[BaseException],
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._atomic.__exit__(exc_type, exc, tb)
