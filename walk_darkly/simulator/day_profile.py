"""Full-shadow length sampled over a day.

Walks the sun across a date at a fixed interval and records how much full
shade an obstruction throws at each step.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional

from ..core.models import Obstruction, ShadowConfig
from ..core.shadow import full_shadow_length_deg
from ..core.sun_position import calculate_sun_position
from ..core.validators import InvalidArgumentError, validate_non_negative
from ..logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class ShadowSample:
    """Shadow at a single timestamp.

    Attributes:
        timestamp: Local time as "HH:MM".
        elevation_deg: Sun elevation in degrees.
        full_length: Full-shadow length, inf while the sun is down.
    """

    timestamp: str
    elevation_deg: float
    full_length: float

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "timestamp": self.timestamp,
            "elevation_deg": round(self.elevation_deg, 1),
            "full_length": self.full_length,
        }


@dataclass
class DayProfile:
    """Shadow samples for one obstruction over one day."""

    obstruction_id: Optional[str]
    samples: list[ShadowSample] = field(default_factory=list)

    def shaded_samples(self, min_length: float = 0.0) -> list[ShadowSample]:
        """Samples whose full shadow is at least ``min_length`` long."""
        return [s for s in self.samples if s.full_length >= min_length]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "obstruction_id": self.obstruction_id,
            "samples": [s.to_dict() for s in self.samples],
        }


def simulate_day(
    obstruction: Obstruction,
    latitude: float,
    longitude: float,
    target_date: date,
    timezone_offset: float = 0.0,
    interval_minutes: int = 30,
    start_hour: int = 5,
    end_hour: int = 21,
    config: Optional[ShadowConfig] = None,
) -> DayProfile:
    """Sample full-shadow length across a day.

    Args:
        obstruction: The obstruction casting shade.
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.
        target_date: The date to sample.
        timezone_offset: Hours offset from UTC.
        interval_minutes: Time between samples.
        start_hour: First hour to include (local time).
        end_hour: Last hour to include (local time).
        config: Person height and validation settings.

    Returns:
        DayProfile with one sample per interval, end inclusive.
    """
    if config is None:
        config = ShadowConfig()
    if interval_minutes <= 0:
        raise InvalidArgumentError(f"interval_minutes must be positive, got {interval_minutes}")
    for name, hour in (("start_hour", start_hour), ("end_hour", end_hour)):
        if not 0 <= hour <= 23:
            raise InvalidArgumentError(f"{name} must be in 0..23, got {hour}")
    if start_hour > end_hour:
        raise InvalidArgumentError(f"start_hour {start_hour} is after end_hour {end_hour}")

    height = obstruction.height
    if config.validate_inputs:
        height = validate_non_negative(height, "height")

    current_time = datetime(target_date.year, target_date.month, target_date.day, start_hour, 0)
    end_time = datetime(target_date.year, target_date.month, target_date.day, end_hour, 0)

    profile = DayProfile(obstruction_id=obstruction.id)
    while current_time <= end_time:
        pos = calculate_sun_position(latitude, longitude, current_time, timezone_offset)
        if pos.is_up:
            length = full_shadow_length_deg(height, config.person_height, pos.elevation_deg)
        else:
            length = math.inf

        profile.samples.append(
            ShadowSample(
                timestamp=current_time.strftime("%H:%M"),
                elevation_deg=pos.elevation_deg,
                full_length=length,
            )
        )
        current_time += timedelta(minutes=interval_minutes)

    logger.debug(
        "Sampled %d shadow lengths for %s on %s",
        len(profile.samples),
        obstruction.id or "obstruction",
        target_date.isoformat(),
    )
    return profile
