"""Mapping of domain errors to HTTP responses."""

from rest_framework import status
from rest_framework.response import Response

from bookings.domain.errors import BookingValidationError, DomainError, ErrorCode

ERROR_STATUS = {
    ErrorCode.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.LINE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TICKET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INSUFFICIENT_QUOTA: status.HTTP_409_CONFLICT,
}


def error_response(error: DomainError) -> Response:
    """Render a domain error; anything not listed above is a 400."""
    body = {"code": error.code.value, "message": error.message}
    if isinstance(error, BookingValidationError):
        body["errors"] = list(error.errors)
    return Response(body, status=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST))
