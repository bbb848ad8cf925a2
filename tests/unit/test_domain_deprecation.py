"""Unit tests for the Deprecation value object."""

from datetime import date

import pytest

from src.domain.value_objects import Deprecation


@pytest.mark.unit
class TestDeprecationHeaders:
    """Test Deprecation.headers()."""

    def test_minimal_deprecation(self):
        """Test since-only deprecation emits Deprecation and Warning."""
        headers = Deprecation(since="1.3").headers()

        assert headers == {
            "Deprecation": "true",
            "Warning": '299 - "Deprecated since 1.3"',
        }

    def test_sunset_is_http_date(self):
        """Test sunset date is rendered as an IMF-fixdate."""
        deprecation = Deprecation(since="1.2", sunset=date(2026, 11, 1))

        assert deprecation.sunset_http_date == "Sun, 01 Nov 2026 00:00:00 GMT"
        assert deprecation.headers()["Sunset"] == "Sun, 01 Nov 2026 00:00:00 GMT"

    def test_no_sunset_header_without_date(self):
        """Test Sunset header is omitted when no date is set."""
        assert "Sunset" not in Deprecation(since="1.2").headers()

    def test_replacement_link(self):
        """Test Link header points at the successor route."""
        headers = Deprecation(
            since="1.2", replacement="/flip/departing/depart"
        ).headers()

        assert headers["Link"] == '</flip/departing/depart>; rel="successor-version"'

    def test_replacement_link_with_media_type(self):
        """Test Link header carries the successor media type."""
        headers = Deprecation(
            since="1.3",
            replacement="/flip/greeting/greet",
            replacement_media_type="application/vnd.flipfoundry.greeting.v2+json",
        ).headers()

        assert headers["Link"] == (
            '</flip/greeting/greet>; rel="successor-version"; '
            'type="application/vnd.flipfoundry.greeting.v2+json"'
        )

    def test_warning_mentions_removal(self):
        """Test for_removal is announced in the warning text."""
        deprecation = Deprecation(
            since="1.2", for_removal=True, replacement="/flip/departing/depart"
        )

        assert deprecation.warning_text() == (
            "Deprecated since 1.2; use /flip/departing/depart; scheduled for removal"
        )
