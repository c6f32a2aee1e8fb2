"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a booking header."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Booking id must be a positive integer")

    @classmethod
    def from_string(cls, value: str | int) -> Self:
        if isinstance(value, bool):
            raise ValueError("Booking id must be a positive integer")
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TicketCode:
    """Catalog key of a ticket.

    Codes are matched case-insensitively, so they are normalised to upper case.
    """

    value: str

    def __post_init__(self) -> None:
        normalised = self.value.strip().upper()
        if not normalised:
            raise ValueError("Ticket code cannot be empty")
        object.__setattr__(self, "value", normalised)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    """Price in the smallest currency unit."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __mul__(self, quantity: int) -> "Money":
        return Money(amount=self.amount * quantity)

    def __add__(self, other: "Money") -> "Money":
        return Money(amount=self.amount + other.amount)

    def __str__(self) -> str:
        return str(self.amount)


@dataclass(frozen=True)
class Quota:
    """Non-negative count of unreserved tickets."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Quota cannot be negative")
