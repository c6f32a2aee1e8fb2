"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.cache import ticket_detail_key, tickets_by_category_key
from bookings.conf import get_config
from bookings.domain.errors import DomainError
from bookings.handlers.errors import error_response
from bookings.handlers.serializers import (
    AvailableCategorySerializer,
    BookingDetailSerializer,
    BookingReceiptSerializer,
    BookingRequestSerializer,
    CategorySummarySerializer,
    LineViewSerializer,
    PageQuerySerializer,
    TicketQuerySerializer,
    TicketSerializer,
)
from bookings.services.booking_service import BookingService
from bookings.services.catalog_service import CatalogService
from bookings.stores.django_store import DjangoTicketCatalog, DjangoUnitOfWork


def get_booking_service() -> BookingService:
    return BookingService(unit_of_work=DjangoUnitOfWork)


def get_catalog_service() -> CatalogService:
    return CatalogService(catalog=DjangoTicketCatalog())


class TicketListView(APIView):
    """Handler for GET /api/tickets"""

    def get(self, request: Request) -> Response:
        params = TicketQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        query = params.to_query()

        page = get_catalog_service().search_available(query)
        return Response(
            {
                "tickets": TicketSerializer(page.items, many=True).data,
                "total_tickets": page.total,
                "page_number": page.page_number,
                "items_per_page": page.page_size,
            }
        )


class TicketsByCategoryView(APIView):
    """Handler for GET /api/tickets/by-category"""

    def get(self, request: Request) -> Response:
        key = tickets_by_category_key()
        data = cache.get(key)
        if data is None:
            categories = get_catalog_service().available_by_category()
            data = {"categories": AvailableCategorySerializer(categories, many=True).data}
            cache.set(key, data, get_config().catalog_cache_timeout)
        return Response(data)


class TicketDetailView(APIView):
    """Handler for GET /api/tickets/{ticket_code}"""

    def get(self, request: Request, ticket_code: str) -> Response:
        key = ticket_detail_key(ticket_code)
        data = cache.get(key)
        if data is None:
            try:
                ticket = get_catalog_service().get_ticket(ticket_code)
            except DomainError as error:
                return error_response(error)
            data = TicketSerializer(ticket).data
            cache.set(key, data, get_config().catalog_cache_timeout)
        return Response(data)


class BookingListView(APIView):
    """Handler for GET and POST /api/bookings"""

    def get(self, request: Request) -> Response:
        params = PageQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        page = get_booking_service().list_bookings(
            params.validated_data["page_number"], params.resolved_page_size()
        )
        return Response(
            {
                "bookings": BookingDetailSerializer(page.items, many=True).data,
                "total_bookings": page.total,
                "page_number": page.page_number,
                "items_per_page": page.page_size,
            }
        )

    def post(self, request: Request) -> Response:
        body = BookingRequestSerializer(data=request.data)
        body.is_valid(raise_exception=True)

        try:
            receipt = get_booking_service().book(body.to_requests())
        except DomainError as error:
            return error_response(error)
        return Response(BookingReceiptSerializer(receipt).data, status=status.HTTP_201_CREATED)


class BookingDetailView(APIView):
    """Handler for GET and PUT /api/bookings/{booking_id}"""

    def get(self, request: Request, booking_id: str) -> Response:
        try:
            detail = get_booking_service().get_booking(booking_id)
        except DomainError as error:
            return error_response(error)
        return Response(BookingDetailSerializer(detail).data)

    def put(self, request: Request, booking_id: str) -> Response:
        body = BookingRequestSerializer(data=request.data)
        body.is_valid(raise_exception=True)

        try:
            categories = get_booking_service().update(booking_id, body.to_requests())
        except DomainError as error:
            return error_response(error)
        return Response({"updated_lines": CategorySummarySerializer(categories, many=True).data})


class BookingRevokeView(APIView):
    """Handler for DELETE /api/bookings/{booking_id}/tickets/{ticket_code}/{quantity}"""

    def delete(self, request: Request, booking_id: str, ticket_code: str, quantity: int) -> Response:
        try:
            lines = get_booking_service().revoke(booking_id, ticket_code, quantity)
        except DomainError as error:
            return error_response(error)
        return Response({"remaining_lines": LineViewSerializer(lines, many=True).data})
