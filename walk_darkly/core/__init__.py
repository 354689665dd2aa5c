"""Core shadow math and models."""

from .shadow import (
    EPSILON,
    approximately_equal,
    degrees_to_radians,
    full_shadow_length,
    full_shadow_length_deg,
    full_shadow_lengths,
    fully_shaded_area,
    fully_shaded_area_deg,
    partial_shadow_length,
    total_shadow_length,
)
from .models import Obstruction, ShadowConfig, ShadowResult, compute_shadow
from .validators import InvalidArgumentError
from .sun_position import SunPosition, calculate_sun_position, full_shadow_length_at

__all__ = [
    "EPSILON",
    "approximately_equal",
    "degrees_to_radians",
    "full_shadow_length",
    "full_shadow_length_deg",
    "full_shadow_lengths",
    "fully_shaded_area",
    "fully_shaded_area_deg",
    "partial_shadow_length",
    "total_shadow_length",
    "Obstruction",
    "ShadowConfig",
    "ShadowResult",
    "compute_shadow",
    "InvalidArgumentError",
    "SunPosition",
    "calculate_sun_position",
    "full_shadow_length_at",
]
