"""Input validation for shadow queries.

The formula functions in :mod:`walk_darkly.core.shadow` accept anything
float() accepts and let IEEE-754 arithmetic handle NaN and infinity. The
checks here are applied by the model layer before it calls them.
"""

import math

ANGLE_UNITS = ("degrees", "radians")


class InvalidArgumentError(ValueError):
    """Raised when a shadow input is not a usable number."""

    pass


def _as_float(value, name: str) -> float:
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be numeric, got bool")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{name} must be numeric, got {type(value).__name__}") from e


def validate_finite(value, name: str) -> float:
    """Check that a value is a finite number.

    Args:
        value: Int or float to check.
        name: Name for error messages.

    Returns:
        The value as a float.

    Raises:
        InvalidArgumentError: If the value is not numeric, NaN or infinite.
    """
    number = _as_float(value, name)
    if not math.isfinite(number):
        raise InvalidArgumentError(f"{name} must be finite, got {number}")
    return number


def validate_non_negative(value, name: str) -> float:
    """Check that a value is a finite number >= 0."""
    number = validate_finite(value, name)
    if number < 0:
        raise InvalidArgumentError(f"{name} must not be negative, got {number}")
    return number


def validate_angle_unit(unit: str) -> str:
    """Normalize and check an angle unit name."""
    normalized = str(unit).strip().lower()
    if normalized not in ANGLE_UNITS:
        raise InvalidArgumentError(
            f"Unknown angle unit {unit!r}. Must be one of {', '.join(ANGLE_UNITS)}"
        )
    return normalized
