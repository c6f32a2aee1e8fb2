"""Unit tests for the category summarizer.

Run with: pytest tests/test_summary.py -v
"""

from bookings.domain import SummaryItem, summarize_by_category


def item(code, category, quantity, unit_price=100):
    return SummaryItem(
        ticket_code=code,
        ticket_name=f"Ticket {code}",
        category_name=category,
        quantity=quantity,
        unit_price=unit_price,
        event_date=None,
    )


class TestSummarizeByCategory:
    """Tests for summarize_by_category."""

    def test_groups_follow_first_occurrence(self):
        """Groups come out in the order their category first appears."""
        summaries = summarize_by_category(
            [item("A", "Theatre", 1), item("B", "Concert", 2), item("C", "Theatre", 3)]
        )
        assert [summary.category_name for summary in summaries] == ["Theatre", "Concert"]
        assert [entry.ticket_code for entry in summaries[0].items] == ["A", "C"]

    def test_quantity_is_summed_per_group(self):
        [summary] = summarize_by_category([item("A", "Concert", 2), item("B", "Concert", 5)])
        assert summary.quantity == 7

    def test_subtotal_only_when_requested(self):
        items = [item("A", "Concert", 2, unit_price=150), item("B", "Concert", 1, unit_price=80)]
        assert summarize_by_category(items)[0].subtotal is None
        assert summarize_by_category(items, with_subtotal=True)[0].subtotal == 380

    def test_items_without_category_are_kept(self):
        summaries = summarize_by_category([item("A", None, 1), item("B", "Concert", 1)])
        assert summaries[0].category_name is None
        assert summaries[0].items[0].ticket_code == "A"

    def test_empty_input_gives_no_groups(self):
        assert summarize_by_category([]) == []
