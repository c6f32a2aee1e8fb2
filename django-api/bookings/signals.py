"""Django signals for cache invalidation.

Invalidation waits for the surrounding transaction to commit, so a read made
before the commit cannot put the old row back into the cache. Quota changes
made by the inventory ledger are conditional ``UPDATE`` queries that do not
fire these signals; the ledger schedules its own invalidation.
"""

from functools import partial

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from bookings.cache import invalidate_all_tickets, invalidate_catalog
from bookings.models import Ticket, TicketCategory


@receiver([post_save, post_delete], sender=Ticket)
def invalidate_ticket_cache(sender, instance, **kwargs):
    """Invalidate caches when a ticket is saved or deleted."""
    transaction.on_commit(partial(invalidate_catalog, instance.ticket_code))


@receiver([post_save, post_delete], sender=TicketCategory)
def invalidate_category_cache(sender, instance, **kwargs):
    """Invalidate caches when a category is saved or deleted."""
    transaction.on_commit(invalidate_all_tickets)
