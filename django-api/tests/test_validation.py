"""Unit tests for the booking validator.

Run with: pytest tests/test_validation.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest

from bookings.domain import Booking, BookingId, BookingLine, LineRequest, Money, Quota, Ticket, TicketCode
from bookings.domain.errors import (
    AvailableQuotaExceededError,
    DuplicateTicketCodeError,
    EventPassedError,
    InvalidQuantityError,
    LineNotFoundError,
    OutOfQuotaError,
    QuotaExceededError,
    TicketNotRegisteredError,
)
from bookings.domain.validation import error_messages, rejected, validate_booking_lines, validate_update_lines

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_ticket(code, *, quota=10, price=100, event_date=NOW + timedelta(days=7)):
    return Ticket(
        code=TicketCode(code),
        name=f"Ticket {code}",
        category_name="Concert",
        price=Money(price),
        event_date=event_date,
        quota=Quota(quota),
    )


def catalog(*tickets):
    return {ticket.code: ticket for ticket in tickets}


class TestValidateBookingLines:
    """Tests for validation of a new booking."""

    def test_valid_lines_are_accepted(self):
        verdicts = validate_booking_lines(
            [LineRequest("T1", 2), LineRequest("T2", 1)],
            catalog(make_ticket("T1"), make_ticket("T2")),
            NOW,
        )
        assert all(verdict.accepted for verdict in verdicts)
        assert error_messages(verdicts) == []

    def test_unknown_code_is_not_registered(self):
        [verdict] = validate_booking_lines([LineRequest("UNKNOWN", 1)], {}, NOW)
        assert isinstance(verdict.error, TicketNotRegisteredError)
        assert verdict.error.message == "Ticket code 'UNKNOWN' is not registered."

    def test_zero_quota_is_out_of_quota(self):
        [verdict] = validate_booking_lines([LineRequest("T1", 1)], catalog(make_ticket("T1", quota=0)), NOW)
        assert isinstance(verdict.error, OutOfQuotaError)

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_quantity_below_one_is_invalid(self, quantity):
        [verdict] = validate_booking_lines([LineRequest("T1", quantity)], catalog(make_ticket("T1")), NOW)
        assert isinstance(verdict.error, InvalidQuantityError)

    def test_quantity_above_quota_is_rejected(self):
        [verdict] = validate_booking_lines([LineRequest("T2", 5)], catalog(make_ticket("T2", quota=2)), NOW)
        assert isinstance(verdict.error, QuotaExceededError)
        assert verdict.error.message == "The quantity of ticket with code 'T2' exceeds the remaining quota."

    def test_quantity_equal_to_quota_is_accepted(self):
        [verdict] = validate_booking_lines([LineRequest("T2", 2)], catalog(make_ticket("T2", quota=2)), NOW)
        assert verdict.accepted

    def test_event_starting_now_has_passed(self):
        """Events must start strictly after the validation time."""
        [verdict] = validate_booking_lines(
            [LineRequest("T1", 1)], catalog(make_ticket("T1", event_date=NOW)), NOW
        )
        assert isinstance(verdict.error, EventPassedError)

    def test_first_failing_rule_wins(self):
        """An out-of-quota ticket reports that rather than the bad quantity."""
        [verdict] = validate_booking_lines([LineRequest("T1", 0)], catalog(make_ticket("T1", quota=0)), NOW)
        assert isinstance(verdict.error, OutOfQuotaError)

    def test_every_failing_line_is_reported(self):
        """Errors are collected across lines instead of stopping at the first."""
        verdicts = validate_booking_lines(
            [LineRequest("T1", 1), LineRequest("NOPE", 1), LineRequest("T2", 9)],
            catalog(make_ticket("T1"), make_ticket("T2", quota=3)),
            NOW,
        )
        assert [verdict.request.ticket_code for verdict in rejected(verdicts)] == ["NOPE", "T2"]
        assert len(error_messages(verdicts)) == 2

    def test_lookup_ignores_case(self):
        [verdict] = validate_booking_lines([LineRequest("t1", 1)], catalog(make_ticket("T1")), NOW)
        assert verdict.accepted

    def test_duplicate_codes_are_rejected_on_each_occurrence(self):
        verdicts = validate_booking_lines(
            [LineRequest("T1", 1), LineRequest("t1", 2)], catalog(make_ticket("T1")), NOW
        )
        assert all(isinstance(verdict.error, DuplicateTicketCodeError) for verdict in verdicts)

    def test_blank_code_is_not_registered(self):
        [verdict] = validate_booking_lines([LineRequest("  ", 1)], {}, NOW)
        assert isinstance(verdict.error, TicketNotRegisteredError)


class TestValidateUpdateLines:
    """Tests for validation of quantity edits on an existing booking."""

    def make_booking(self):
        booking_id = BookingId(7)
        return Booking(
            id=booking_id,
            total_price=Money(600),
            created_at=NOW,
            lines=(
                BookingLine(
                    id=1, booking_id=booking_id, ticket_code=TicketCode("T1"), quantity=6, subtotal_price=Money(600)
                ),
            ),
        )

    def test_quantity_within_quota_is_accepted(self):
        [verdict] = validate_update_lines(self.make_booking(), [LineRequest("T1", 3)], catalog(make_ticket("T1", quota=4)))
        assert verdict.accepted

    def test_code_missing_from_booking_is_line_not_found(self):
        [verdict] = validate_update_lines(self.make_booking(), [LineRequest("T2", 1)], catalog(make_ticket("T2")))
        assert isinstance(verdict.error, LineNotFoundError)
        assert verdict.error.message == "Ticket code 'T2' is not part of this booking."

    def test_line_whose_ticket_left_the_catalog_is_not_registered(self):
        [verdict] = validate_update_lines(self.make_booking(), [LineRequest("T1", 1)], {})
        assert isinstance(verdict.error, TicketNotRegisteredError)

    def test_new_quantity_is_compared_with_remaining_quota_only(self):
        """The quantity already held by the line is not added back to the quota."""
        [verdict] = validate_update_lines(self.make_booking(), [LineRequest("T1", 5)], catalog(make_ticket("T1", quota=4)))
        assert isinstance(verdict.error, AvailableQuotaExceededError)
        assert verdict.error.message == "Quantity for ticket code 'T1' exceeds the available quota."

    def test_zero_quantity_is_invalid(self):
        [verdict] = validate_update_lines(self.make_booking(), [LineRequest("T1", 0)], catalog(make_ticket("T1")))
        assert isinstance(verdict.error, InvalidQuantityError)

    def test_duplicate_codes_are_rejected(self):
        verdicts = validate_update_lines(
            self.make_booking(), [LineRequest("T1", 1), LineRequest("T1", 2)], catalog(make_ticket("T1"))
        )
        assert all(isinstance(verdict.error, DuplicateTicketCodeError) for verdict in verdicts)
