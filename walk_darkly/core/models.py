"""Data models for shadow queries."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from ..logging_config import get_logger
from .shadow import (
    degrees_to_radians,
    full_shadow_length,
    fully_shaded_area,
    partial_shadow_length,
    total_shadow_length,
)
from .validators import (
    InvalidArgumentError,
    validate_angle_unit,
    validate_finite,
    validate_non_negative,
)

logger = get_logger(__name__)

# About six feet, in meters
DEFAULT_PERSON_HEIGHT = 1.83


@dataclass
class Obstruction:
    """A wall or building that casts shade.

    Attributes:
        height: Height of the obstruction.
        run_length: Length along the ground the obstruction runs for.
        id: Optional identifier supplied by the caller.
    """

    height: float
    run_length: float = 1.0
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> Obstruction:
        """Create from dictionary."""
        return cls(
            height=data["height"],
            run_length=data.get("run_length", 1.0),
            id=data.get("id"),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "height": self.height,
            "run_length": self.run_length,
        }


@dataclass
class ShadowConfig:
    """Settings shared by every shadow query.

    Attributes:
        person_height: Height the shade must reach to count as full shade.
        angle_unit: Unit of angles passed to compute_shadow ("degrees" or "radians").
        validate_inputs: Reject non-finite inputs instead of propagating NaN/inf.
    """

    person_height: float = DEFAULT_PERSON_HEIGHT
    angle_unit: str = "degrees"
    validate_inputs: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.validate_inputs, bool):
            raise InvalidArgumentError(
                f"validate_inputs must be a bool, got {type(self.validate_inputs).__name__}"
            )
        self.angle_unit = validate_angle_unit(self.angle_unit)
        if self.validate_inputs:
            self.person_height = validate_non_negative(self.person_height, "person_height")

    @classmethod
    def from_dict(cls, data: dict) -> ShadowConfig:
        """Create configuration from a dictionary."""
        return cls(
            person_height=data.get("person_height", DEFAULT_PERSON_HEIGHT),
            angle_unit=data.get("angle_unit", "degrees"),
            validate_inputs=data.get("validate_inputs", True),
        )

    def to_dict(self) -> dict:
        """Convert configuration to a dictionary."""
        return {
            "person_height": self.person_height,
            "angle_unit": self.angle_unit,
            "validate_inputs": self.validate_inputs,
        }

    def to_radians(self, angle: float) -> float:
        """Interpret an angle in this config's unit and return radians."""
        if self.angle_unit == "degrees":
            return degrees_to_radians(angle)
        return float(angle)


@dataclass
class ShadowResult:
    """Result of a shadow query.

    Attributes:
        full_length: Ground length where the shade covers a person.
        total_length: Ground length of the whole shadow.
        partial_length: Shadow tail too low to cover a person.
        area: Fully shaded area (full_length * run_length).
        angle_rad: Sun angle used, in radians.
    """

    full_length: float
    total_length: float
    partial_length: float
    area: float
    angle_rad: float

    @property
    def is_unbounded(self) -> bool:
        """True when the sun is on the horizon and the shadow never ends."""
        return math.isinf(self.full_length) and self.full_length > 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "full_length": self.full_length,
            "total_length": self.total_length,
            "partial_length": self.partial_length,
            "area": self.area,
            "angle_rad": self.angle_rad,
        }


def compute_shadow(
    obstruction: Obstruction,
    angle: float,
    config: Optional[ShadowConfig] = None,
) -> ShadowResult:
    """Compute full, partial and total shadow for one obstruction.

    Args:
        obstruction: The obstruction casting shade.
        angle: Sun angle of incidence, in ``config.angle_unit``.
        config: Query settings. Defaults to ShadowConfig().

    Returns:
        ShadowResult for the obstruction at this angle.

    Raises:
        InvalidArgumentError: If validation is enabled and an input is not
            a finite number, or a height/run length is negative.
    """
    if config is None:
        config = ShadowConfig()

    height = obstruction.height
    run_length = obstruction.run_length
    if config.validate_inputs:
        height = validate_non_negative(height, "height")
        run_length = validate_non_negative(run_length, "run_length")
        angle = validate_finite(angle, "angle")

    angle_rad = config.to_radians(angle)
    person_height = config.person_height

    full = full_shadow_length(height, person_height, angle_rad)
    if math.isinf(full):
        logger.debug(
            "Sun on the horizon at %.6f rad, shadow of %s is unbounded",
            angle_rad,
            obstruction.id or "obstruction",
        )

    return ShadowResult(
        full_length=full,
        total_length=total_shadow_length(height, angle_rad),
        partial_length=partial_shadow_length(person_height, angle_rad),
        area=fully_shaded_area(run_length, height, person_height, angle_rad),
        angle_rad=angle_rad,
    )
