"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class TicketCategory(models.Model):
    """Persistence model for ticket categories."""

    name = models.CharField(max_length=50, unique=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "ticket categories"

    def __str__(self) -> str:
        return self.name


class Ticket(models.Model):
    """Persistence model for sellable tickets.

    ``quota`` is the remaining unreserved inventory. Only the inventory
    ledger changes it once the ticket is issued.
    """

    ticket_code = models.CharField(max_length=20, primary_key=True)
    ticket_name = models.CharField(max_length=100)
    category = models.ForeignKey(
        TicketCategory, on_delete=models.PROTECT, related_name="tickets"
    )
    price = models.PositiveIntegerField()
    event_date = models.DateTimeField()
    quota = models.PositiveIntegerField()

    class Meta:
        ordering = ["ticket_code"]
        indexes = [
            models.Index(fields=["event_date"], name="bookings_ticket_event_idx"),
        ]

    def save(self, *args, **kwargs) -> None:
        self.ticket_code = self.ticket_code.strip().upper()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.ticket_code} - {self.ticket_name}"


class BookedTicket(models.Model):
    """Persistence model for booking headers."""

    total_price = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"Booking {self.pk} - {self.total_price}"


class BookedTicketDetail(models.Model):
    """Persistence model for booking lines.

    ``ticket_code`` is a lookup key into the catalog, not a foreign key.
    """

    booked_ticket = models.ForeignKey(
        BookedTicket, on_delete=models.CASCADE, related_name="details"
    )
    ticket_code = models.CharField(max_length=20)
    quantity = models.PositiveIntegerField()
    subtotal_price = models.PositiveIntegerField()

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["booked_ticket", "ticket_code"],
                name="unique_ticket_per_booking",
            ),
        ]
        indexes = [
            models.Index(fields=["ticket_code"], name="bookings_line_ticket_code_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.ticket_code} x{self.quantity}"
