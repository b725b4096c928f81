"""Tests for domain time helpers."""

from datetime import datetime, timezone

import pytest

from cashbook.domain.shared.time import ensure_tz_aware, parse_iso_datetime


class TestParseIsoDatetime:
    def test_trailing_z(self):
        assert parse_iso_datetime("2024-03-01T10:00:00Z") == datetime(
            2024, 3, 1, 10, 0, tzinfo=timezone.utc
        )

    def test_offset_is_converted_to_utc(self):
        parsed = parse_iso_datetime("2024-03-01T10:00:00+02:00")

        assert parsed == datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)

    def test_plain_date(self):
        assert parse_iso_datetime("2024-03-01") == datetime(
            2024, 3, 1, tzinfo=timezone.utc
        )

    def test_garbage_raises_value_error(self):
        with pytest.raises(ValueError):
            parse_iso_datetime("03/01/2024")


def test_ensure_tz_aware_keeps_aware_values():
    aware = datetime(2024, 1, 1, tzinfo=timezone.utc)

    assert ensure_tz_aware(aware) is aware
    assert ensure_tz_aware(datetime(2024, 1, 1)).tzinfo == timezone.utc
