"""Serializers for request parsing and for rendering domain models."""

from rest_framework import serializers

from bookings.conf import get_config
from bookings.domain import LineRequest
from bookings.stores.interfaces import TICKET_ORDERINGS, TicketQuery

# Requests


class LineRequestSerializer(serializers.Serializer):
    """One requested (ticket code, quantity) pair."""

    ticket_code = serializers.CharField(max_length=20)
    quantity = serializers.IntegerField()


class BookingRequestSerializer(serializers.Serializer):
    """Body of book and update requests."""

    tickets = LineRequestSerializer(many=True, allow_empty=False)

    def to_requests(self) -> list[LineRequest]:
        return [
            LineRequest(ticket_code=line["ticket_code"], quantity=line["quantity"])
            for line in self.validated_data["tickets"]
        ]


class PageQuerySerializer(serializers.Serializer):
    """Paging parameters shared by the list endpoints."""

    page_number = serializers.IntegerField(min_value=1, default=1)
    page_size = serializers.IntegerField(min_value=1, required=False)

    def validate_page_size(self, value: int) -> int:
        limit = get_config().max_page_size
        if value > limit:
            raise serializers.ValidationError(f"Ensure this value is less than or equal to {limit}.")
        return value

    def resolved_page_size(self) -> int:
        return self.validated_data.get("page_size") or get_config().default_page_size


class TicketQuerySerializer(serializers.Serializer):
    """Query parameters of the ticket catalog listing."""

    category_name = serializers.CharField(required=False)
    ticket_code = serializers.CharField(required=False)
    ticket_name = serializers.CharField(required=False)
    max_price = serializers.IntegerField(min_value=0, required=False)
    min_event_date = serializers.DateTimeField(required=False)
    max_event_date = serializers.DateTimeField(required=False)
    order_by = serializers.ChoiceField(choices=TICKET_ORDERINGS, default="ticket_code")
    order_state = serializers.ChoiceField(choices=["asc", "desc"], default="asc")
    page_number = serializers.IntegerField(min_value=1, default=1)
    tickets_per_page = serializers.IntegerField(min_value=1, required=False)

    def validate_tickets_per_page(self, value: int) -> int:
        limit = get_config().max_page_size
        if value > limit:
            raise serializers.ValidationError(f"Ensure this value is less than or equal to {limit}.")
        return value

    def to_query(self) -> TicketQuery:
        data = self.validated_data
        return TicketQuery(
            category_name=data.get("category_name"),
            ticket_code=data.get("ticket_code"),
            ticket_name=data.get("ticket_name"),
            max_price=data.get("max_price"),
            min_event_date=data.get("min_event_date"),
            max_event_date=data.get("max_event_date"),
            order_by=data["order_by"],
            descending=data["order_state"] == "desc",
            page_number=data["page_number"],
            page_size=data.get("tickets_per_page") or get_config().default_page_size,
        )


# Responses


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    ticket_code = serializers.CharField(source="code.value")
    ticket_name = serializers.CharField(source="name")
    category_name = serializers.CharField()
    price = serializers.IntegerField(source="price.amount")
    event_date = serializers.DateTimeField()
    quota = serializers.IntegerField(source="quota.value")


class SummaryItemSerializer(serializers.Serializer):
    """A booked ticket within a category summary."""

    ticket_code = serializers.CharField()
    ticket_name = serializers.CharField(allow_null=True)
    event_date = serializers.DateTimeField(allow_null=True)
    quantity = serializers.IntegerField()
    price = serializers.IntegerField(source="unit_price")


class CategorySummarySerializer(serializers.Serializer):
    """Booked tickets sharing a category."""

    category_name = serializers.CharField(allow_null=True)
    quantity = serializers.IntegerField()
    tickets = SummaryItemSerializer(source="items", many=True)


class CategorySubtotalSerializer(CategorySummarySerializer):
    """Category summary of a fresh booking, with its price subtotal."""

    subtotal = serializers.IntegerField()


class AvailableTicketSerializer(serializers.Serializer):
    """A ticket with quota left, within a catalog category."""

    ticket_code = serializers.CharField()
    ticket_name = serializers.CharField()
    event_date = serializers.DateTimeField()
    price = serializers.IntegerField(source="unit_price")
    quota = serializers.IntegerField(source="quantity")


class AvailableCategorySerializer(serializers.Serializer):
    """Catalog tickets sharing a category."""

    category_name = serializers.CharField(allow_null=True)
    tickets = AvailableTicketSerializer(source="items", many=True)


class BookingReceiptSerializer(serializers.Serializer):
    """Serializer for a successful booking."""

    booking_id = serializers.IntegerField(source="booking_id.value")
    total_price = serializers.IntegerField(source="total_price.amount")
    categories = CategorySubtotalSerializer(many=True)


class BookingDetailSerializer(serializers.Serializer):
    """Serializer for a stored booking."""

    booking_id = serializers.IntegerField(source="booking.id.value")
    total_price = serializers.IntegerField(source="booking.total_price.amount")
    created_at = serializers.DateTimeField(source="booking.created_at")
    categories = CategorySummarySerializer(many=True)


class LineViewSerializer(serializers.Serializer):
    """A remaining booking line after a revoke."""

    ticket_code = serializers.CharField()
    ticket_name = serializers.CharField(allow_null=True)
    category_name = serializers.CharField(allow_null=True)
    quantity = serializers.IntegerField()
