"""Category summaries for booking and catalog responses."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SummaryItem:
    """One ticket or booking line as seen by the summarizer."""

    ticket_code: str
    ticket_name: str | None
    category_name: str | None
    quantity: int
    unit_price: int
    event_date: datetime | None


@dataclass(frozen=True)
class CategorySummary:
    """Items sharing a category name, with their quantity and price totals."""

    category_name: str | None
    quantity: int
    subtotal: int | None
    items: tuple[SummaryItem, ...]


def summarize_by_category(items: Iterable[SummaryItem], *, with_subtotal: bool = False) -> list[CategorySummary]:
    """Group items by category name.

    Groups come out in order of first occurrence and keep their members in
    source order. Items without a category are grouped under ``None`` rather
    than dropped.

    Args:
        items: The items to group.
        with_subtotal: Whether to compute ``quantity * unit_price`` per group.
            Only the booking confirmation carries a subtotal.

    Returns:
        One summary per non-empty category.
    """
    groups: dict[str | None, list[SummaryItem]] = {}
    for item in items:
        groups.setdefault(item.category_name, []).append(item)

    return [
        CategorySummary(
            category_name=name,
            quantity=sum(member.quantity for member in members),
            subtotal=sum(member.quantity * member.unit_price for member in members) if with_subtotal else None,
            items=tuple(members),
        )
        for name, members in groups.items()
        if members
    ]
