"""Sun angle of incidence for a location and time.

Uses the NOAA fractional-year approximation, which is accurate to a
fraction of a degree and plenty for deciding which side of a street is
shaded.
"""

import math
from dataclasses import dataclass
from datetime import datetime

from .shadow import full_shadow_length_deg


@dataclass
class SunPosition:
    """Sun position at a specific time.

    Attributes:
        azimuth_deg: Azimuth in degrees, clockwise from North [0, 360).
        elevation_deg: Elevation above horizon in degrees [-90, +90].
        timestamp: The datetime for this position.
    """

    azimuth_deg: float
    elevation_deg: float
    timestamp: datetime

    @property
    def is_up(self) -> bool:
        """Whether the sun is above the horizon."""
        return self.elevation_deg > 0


def _fractional_year(dt: datetime) -> float:
    days_in_year = 366 if _is_leap_year(dt.year) else 365
    day_of_year = dt.timetuple().tm_yday
    return 2 * math.pi / days_in_year * (day_of_year - 1 + (dt.hour - 12) / 24)


def _equation_of_time(gamma: float) -> float:
    """Equation of time in minutes."""
    return 229.18 * (
        0.000075
        + 0.001868 * math.cos(gamma)
        - 0.032077 * math.sin(gamma)
        - 0.014615 * math.cos(2 * gamma)
        - 0.040849 * math.sin(2 * gamma)
    )


def _declination(gamma: float) -> float:
    """Solar declination in radians."""
    return (
        0.006918
        - 0.399912 * math.cos(gamma)
        + 0.070257 * math.sin(gamma)
        - 0.006758 * math.cos(2 * gamma)
        + 0.000907 * math.sin(2 * gamma)
        - 0.002697 * math.cos(3 * gamma)
        + 0.00148 * math.sin(3 * gamma)
    )


def calculate_sun_position(
    latitude: float,
    longitude: float,
    dt: datetime,
    timezone_offset: float = 0.0,
) -> SunPosition:
    """Calculate sun position for a given location and local time.

    Args:
        latitude: Latitude in degrees (positive = North).
        longitude: Longitude in degrees (negative = West).
        dt: Local datetime.
        timezone_offset: Hours offset from UTC.

    Returns:
        SunPosition with azimuth and elevation.
    """
    lat_rad = math.radians(latitude)
    gamma = _fractional_year(dt)
    decl = _declination(gamma)

    time_offset = _equation_of_time(gamma) + 4 * longitude - 60 * timezone_offset
    true_solar_minutes = dt.hour * 60 + dt.minute + dt.second / 60 + time_offset
    hour_angle = ((true_solar_minutes / 4) % 360) - 180

    cos_zenith = (
        math.sin(lat_rad) * math.sin(decl)
        + math.cos(lat_rad) * math.cos(decl) * math.cos(math.radians(hour_angle))
    )
    zenith_rad = math.acos(max(-1.0, min(1.0, cos_zenith)))
    elevation_deg = 90 - math.degrees(zenith_rad)

    sin_zenith = math.sin(zenith_rad)
    cos_lat = math.cos(lat_rad)
    if abs(sin_zenith * cos_lat) < 1e-10:
        # Overhead or at a pole; azimuth is undefined, report due South
        azimuth_deg = 180.0
    else:
        cos_azimuth = (math.sin(lat_rad) * cos_zenith - math.sin(decl)) / (cos_lat * sin_zenith)
        from_south = math.degrees(math.acos(max(-1.0, min(1.0, cos_azimuth))))
        # Morning sun is East of the meridian
        azimuth_deg = 180 - from_south if hour_angle <= 0 else 180 + from_south

    return SunPosition(
        azimuth_deg=azimuth_deg % 360.0,
        elevation_deg=elevation_deg,
        timestamp=dt,
    )


def full_shadow_length_at(
    h1: float,
    h2: float,
    latitude: float,
    longitude: float,
    dt: datetime,
    timezone_offset: float = 0.0,
) -> float:
    """Full-shadow length behind an obstruction at a place and time.

    Returns ``math.inf`` while the sun is at or below the horizon, since
    the whole ground is in shade then.
    """
    position = calculate_sun_position(latitude, longitude, dt, timezone_offset)
    if not position.is_up:
        return math.inf
    return full_shadow_length_deg(h1, h2, position.elevation_deg)


def _is_leap_year(year: int) -> bool:
    """Check if a year is a leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
