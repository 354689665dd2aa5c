"""Shadow geometry for routing pedestrians through full shade."""

from .core import (
    approximately_equal,
    degrees_to_radians,
    full_shadow_length,
    full_shadow_length_deg,
    fully_shaded_area,
    fully_shaded_area_deg,
)

__version__ = "0.1.0"

__all__ = [
    "approximately_equal",
    "degrees_to_radians",
    "full_shadow_length",
    "full_shadow_length_deg",
    "fully_shaded_area",
    "fully_shaded_area_deg",
]
