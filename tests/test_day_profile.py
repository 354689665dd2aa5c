"""Tests for the day profile simulator."""

import math
from datetime import date

import pytest

from walk_darkly.core.models import Obstruction, ShadowConfig
from walk_darkly.core.validators import InvalidArgumentError
from walk_darkly.simulator.day_profile import simulate_day


EQUINOX = date(2023, 3, 21)


class TestSimulateDay:
    """Tests for simulate_day."""

    def test_sample_count_is_end_inclusive(self):
        profile = simulate_day(Obstruction(height=30, id="tower"), 0.0, 0.0, EQUINOX, interval_minutes=60)
        assert len(profile.samples) == 17
        assert profile.samples[0].timestamp == "05:00"
        assert profile.samples[-1].timestamp == "21:00"
        assert profile.obstruction_id == "tower"

    def test_before_sunrise_is_unbounded(self):
        profile = simulate_day(Obstruction(height=30), 0.0, 0.0, EQUINOX, interval_minutes=60)
        assert profile.samples[0].full_length == math.inf

    def test_noon_is_short(self):
        profile = simulate_day(Obstruction(height=30), 0.0, 0.0, EQUINOX, interval_minutes=60)
        noon = next(s for s in profile.samples if s.timestamp == "12:00")
        assert 0 <= noon.full_length < 3

    def test_shaded_samples_filter(self):
        profile = simulate_day(Obstruction(height=30), 0.0, 0.0, EQUINOX, interval_minutes=60)
        long_shadows = profile.shaded_samples(min_length=100)
        assert long_shadows
        assert all(s.full_length >= 100 for s in long_shadows)
        assert len(long_shadows) < len(profile.samples)

    def test_person_height_from_config(self):
        config = ShadowConfig(person_height=30)
        profile = simulate_day(Obstruction(height=30), 0.0, 0.0, EQUINOX, interval_minutes=60, config=config)
        daytime = [s for s in profile.samples if s.elevation_deg > 0]
        assert daytime
        assert all(s.full_length == pytest.approx(0.0, abs=1e-10) for s in daytime)

    def test_non_positive_interval_raises(self):
        with pytest.raises(InvalidArgumentError):
            simulate_day(Obstruction(height=30), 0.0, 0.0, EQUINOX, interval_minutes=0)

    def test_end_hour_out_of_range_raises(self):
        with pytest.raises(InvalidArgumentError, match="end_hour"):
            simulate_day(Obstruction(height=30), 0.0, 0.0, EQUINOX, end_hour=24)

    def test_negative_start_hour_raises(self):
        with pytest.raises(InvalidArgumentError, match="start_hour"):
            simulate_day(Obstruction(height=30), 0.0, 0.0, EQUINOX, start_hour=-1)

    def test_reversed_hours_raise(self):
        with pytest.raises(InvalidArgumentError):
            simulate_day(Obstruction(height=30), 0.0, 0.0, EQUINOX, start_hour=18, end_hour=6)

    def test_nan_height_raises(self):
        with pytest.raises(InvalidArgumentError):
            simulate_day(Obstruction(height=float("nan")), 0.0, 0.0, EQUINOX)

    def test_to_dict(self):
        profile = simulate_day(Obstruction(height=30, id="a"), 0.0, 0.0, EQUINOX, start_hour=12, end_hour=12)
        data = profile.to_dict()
        assert data["obstruction_id"] == "a"
        assert len(data["samples"]) == 1
        assert data["samples"][0]["timestamp"] == "12:00"
