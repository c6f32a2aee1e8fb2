"""Cache keys for catalog responses and their invalidation."""

import logging

from django.core.cache import cache

from bookings.conf import get_config

logger = logging.getLogger(__name__)


def tickets_by_category_key() -> str:
    return f"{get_config().cache_key_prefix}:tickets:by-category"


def ticket_detail_key(ticket_code: str) -> str:
    return f"{get_config().cache_key_prefix}:tickets:{ticket_code.strip().upper()}"


def invalidate_catalog(*ticket_codes: str) -> None:
    """Drop the grouped catalog and the detail entries for ``ticket_codes``."""
    keys = [tickets_by_category_key(), *(ticket_detail_key(code) for code in ticket_codes)]
    cache.delete_many(keys)
    logger.debug("Invalidated catalog cache keys %s", keys)


def invalidate_all_tickets() -> None:
    """Drop every catalog entry, used when a category changes name."""
    from bookings.models import Ticket

    invalidate_catalog(*Ticket.objects.values_list("ticket_code", flat=True))
