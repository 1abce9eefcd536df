"""Tests for RFC 3339 timestamp recognition."""

from __future__ import annotations

import pytest

from jsl.core.timestamps import is_rfc3339_timestamp


class TestValidTimestamps:
    @pytest.mark.parametrize(
        "value",
        [
            "1985-04-12T23:20:50.52Z",
            "1996-12-19T16:39:57-08:00",
            "1990-12-31T23:59:60Z",
            "1990-12-31T15:59:60-08:00",
            "1937-01-01T12:00:27.87+00:20",
            "2000-02-29T00:00:00z",
            "2020-01-01t00:00:00+00:00",
            "0000-01-01T00:00:00Z",
            "2024-06-30T12:30:45.123456789+14:00",
        ],
    )
    def test_accepted(self, value: str) -> None:
        assert is_rfc3339_timestamp(value)


class TestInvalidTimestamps:
    @pytest.mark.parametrize(
        "value",
        [
            "",
            "1985-04-12",
            "23:20:50Z",
            "1985-04-12T23:20:50",          # no offset
            "1985-04-12 23:20:50Z",         # space separator
            "1985-04-12T23:20:50.Z",        # empty fraction
            "1985-4-12T23:20:50Z",
            "1985-13-01T00:00:00Z",
            "1985-00-01T00:00:00Z",
            "1985-04-31T00:00:00Z",
            "1900-02-29T00:00:00Z",         # not a leap year
            "1985-04-12T24:00:00Z",
            "1985-04-12T23:60:00Z",
            "1985-04-12T23:59:61Z",
            "1985-04-12T23:20:50+24:00",
            "1985-04-12T23:20:50+05:60",
            "1985-04-12T23:20:50+0500",
            " 1985-04-12T23:20:50Z",
            "1985-04-12T23:20:50Z\n",
            "１９８５-04-12T23:20:50Z",      # full-width digits
        ],
    )
    def test_rejected(self, value: str) -> None:
        assert not is_rfc3339_timestamp(value)

    def test_leap_day_in_leap_year(self) -> None:
        assert is_rfc3339_timestamp("2000-02-29T00:00:00Z")
        assert not is_rfc3339_timestamp("2000-02-30T00:00:00Z")
