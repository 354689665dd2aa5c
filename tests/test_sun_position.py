"""Tests for sun position and shadow-at-time helpers."""

import math
from datetime import datetime

from walk_darkly.core.sun_position import (
    _is_leap_year,
    calculate_sun_position,
    full_shadow_length_at,
)


class TestCalculateSunPosition:
    """Tests for calculate_sun_position at the equator on an equinox."""

    def test_noon_sun_is_nearly_overhead(self):
        pos = calculate_sun_position(0.0, 0.0, datetime(2023, 3, 21, 12, 0))
        assert pos.elevation_deg > 85
        assert pos.is_up

    def test_midnight_sun_is_down(self):
        pos = calculate_sun_position(0.0, 0.0, datetime(2023, 3, 21, 0, 0))
        assert pos.elevation_deg < 0
        assert not pos.is_up

    def test_morning_sun_is_east(self):
        pos = calculate_sun_position(0.0, 0.0, datetime(2023, 3, 21, 8, 0))
        assert 45 < pos.azimuth_deg < 135

    def test_afternoon_sun_is_west(self):
        pos = calculate_sun_position(0.0, 0.0, datetime(2023, 3, 21, 16, 0))
        assert 225 < pos.azimuth_deg < 315

    def test_hour_angle_wraps_past_midnight(self):
        """Far-east longitude on UTC clock time is solar morning the next day."""
        pos = calculate_sun_position(0.0, 170.0, datetime(2023, 3, 21, 23, 0))
        assert pos.is_up
        assert 0 < pos.azimuth_deg < 180

    def test_elevation_and_azimuth_ranges(self):
        for hour in range(0, 24, 2):
            pos = calculate_sun_position(40.7, -74.0, datetime(2023, 6, 21, hour, 0), -4.0)
            assert -90 <= pos.elevation_deg <= 90
            assert 0 <= pos.azimuth_deg < 360

    def test_timestamp_is_kept(self):
        dt = datetime(2023, 6, 21, 9, 30)
        assert calculate_sun_position(40.7, -74.0, dt).timestamp == dt


class TestFullShadowLengthAt:
    """Tests for full_shadow_length_at."""

    def test_night_is_all_shade(self):
        length = full_shadow_length_at(30, 1.83, 0.0, 0.0, datetime(2023, 3, 21, 0, 0))
        assert length == math.inf

    def test_noon_shadow_is_short(self):
        length = full_shadow_length_at(30, 1.83, 0.0, 0.0, datetime(2023, 3, 21, 12, 0))
        assert 0 <= length < 3

    def test_morning_shadow_is_longer_than_noon(self):
        morning = full_shadow_length_at(30, 1.83, 0.0, 0.0, datetime(2023, 3, 21, 8, 0))
        noon = full_shadow_length_at(30, 1.83, 0.0, 0.0, datetime(2023, 3, 21, 12, 0))
        assert morning > noon


def test_leap_years():
    assert _is_leap_year(2024)
    assert _is_leap_year(2000)
    assert not _is_leap_year(1900)
    assert not _is_leap_year(2023)
