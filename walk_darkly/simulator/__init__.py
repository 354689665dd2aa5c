"""Shadow sampling over time."""

from .day_profile import simulate_day, ShadowSample, DayProfile

__all__ = [
    "simulate_day",
    "ShadowSample",
    "DayProfile",
]
