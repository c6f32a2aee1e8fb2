from django.contrib import admin

from bookings.models import BookedTicket, BookedTicketDetail, Ticket, TicketCategory


class TicketInline(admin.TabularInline):
    """Existing tickets of a category; new tickets are added on the ticket page."""

    model = Ticket
    extra = 0
    readonly_fields = ["quota"]

    def has_add_permission(self, request, obj=None):
        return False


class BookedTicketDetailInline(admin.TabularInline):
    model = BookedTicketDetail
    extra = 0
    readonly_fields = ["ticket_code", "quantity", "subtotal_price"]
    can_delete = False


@admin.register(TicketCategory)
class TicketCategoryAdmin(admin.ModelAdmin):
    list_display = ["name"]
    search_fields = ["name"]
    inlines = [TicketInline]


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ["ticket_code", "ticket_name", "category", "price", "event_date", "quota"]
    list_filter = ["category"]
    search_fields = ["ticket_code", "ticket_name"]

    def get_readonly_fields(self, request, obj=None):
        # Once issued, quota only moves through bookings.
        if obj is not None:
            return ["quota"]
        return []


@admin.register(BookedTicket)
class BookedTicketAdmin(admin.ModelAdmin):
    list_display = ["id", "total_price", "created_at"]
    readonly_fields = ["total_price", "created_at"]
    inlines = [BookedTicketDetailInline]
