"""Tests for bookings configuration.

Run with: pytest tests/test_conf.py -v
"""

import pytest
from django.test import override_settings

from bookings.conf import BookingsSettings, get_config


class TestGetConfig:
    """Tests for get_config."""

    def test_defaults_apply_for_missing_keys(self):
        with override_settings(BOOKINGS={}):
            assert get_config() == BookingsSettings()

    def test_reads_overrides(self):
        with override_settings(BOOKINGS={"default_page_size": 5, "cache_key_prefix": "test"}):
            config = get_config()
        assert (config.default_page_size, config.cache_key_prefix) == (5, "test")

    def test_cache_is_cleared_when_settings_change(self):
        with override_settings(BOOKINGS={"max_page_size": 50}):
            assert get_config().max_page_size == 50
        with override_settings(BOOKINGS={"max_page_size": 60}):
            assert get_config().max_page_size == 60

    def test_rejects_non_mapping(self):
        with override_settings(BOOKINGS=["bad"]), pytest.raises(TypeError):
            get_config()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"default_page_size": 0},
            {"default_page_size": 20, "max_page_size": 10},
            {"catalog_cache_timeout": -1},
            {"cache_key_prefix": ""},
        ],
    )
    def test_rejects_invalid_values(self, overrides):
        with override_settings(BOOKINGS=overrides), pytest.raises(ValueError):
            get_config()

    def test_page_size_override_reaches_listing(self, api_client, make_ticket):
        for code in ("A", "B", "C"):
            make_ticket(code)

        with override_settings(BOOKINGS={"default_page_size": 2}):
            response = api_client.get("/api/tickets")

        assert len(response.json()["tickets"]) == 2
