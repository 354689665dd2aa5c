"""Shadow length and area math for full-shade routing.

In a 2D plane, given a wall and the angle of incidence of the sun, these
functions find what horizontal distance along the ground is covered by
shade tall enough to cover a person.

Geometry (side view):

    (sun)
         \\
           \\
             \\
             _
            | | \\
            | |   \\
            | |h1   \\
            | |       \\
            | |         |\\
            | |       h2|  \\
            | |____x____|_x'_Θ\\
               |______x''______|

Where:
    - Θ is the angle of incidence of the sun with the ground
    - h1 is the height of the obstruction
    - h2 is the height of the person
    - x'' = h1 / tan(Θ) is the total horizontal shadow
    - x' = h2 / tan(Θ) is the shadow tail too low to cover the person
    - x = x'' - x' = (1 / tan(Θ)) * (h1 - h2) is the full shadow

Units don't matter as long as both heights use the same one.

Angles where tan(Θ) is zero (0°, 180°, ...) put the sun on the horizon,
which gives an unbounded shadow on flat ground. These return ``math.inf``.
"""

import math

import numpy as np

# Absolute tolerance on tan(Θ) for the horizon check
EPSILON = 1e-10


def approximately_equal(a: float, b: float, tolerance: float = EPSILON) -> bool:
    """Return True if ``a`` and ``b`` differ by less than ``tolerance``."""
    return abs(float(a) - float(b)) < tolerance


def degrees_to_radians(angle_deg: float) -> float:
    """Convert an angle in degrees to radians."""
    return float(angle_deg) * math.pi / 180.0


def total_shadow_length(height: float, angle_rad: float) -> float:
    """Compute the horizontal extent of the whole shadow of a height.

    Args:
        height: Height of the object casting the shadow.
        angle_rad: Sun angle of incidence in radians.

    Returns:
        Shadow length in the unit of ``height``, or ``math.inf`` when the
        sun is on the horizon.
    """
    tangent = math.tan(float(angle_rad))
    if approximately_equal(tangent, 0.0):
        return math.inf
    return abs(1.0 / tangent) * float(height)


def partial_shadow_length(person_height: float, angle_rad: float) -> float:
    """Compute the shadow tail that is too low to cover a person.

    This is the stretch at the far end of an obstruction's shadow where
    the shade line sits below ``person_height``.
    """
    return total_shadow_length(person_height, angle_rad)


def full_shadow_length(h1: float, h2: float, angle_rad: float) -> float:
    """Compute the length of the fully shaded strip on the ground.

    Args:
        h1: Height of the obstruction.
        h2: Height of the person, same unit as ``h1``.
        angle_rad: Sun angle of incidence in radians. Not range checked.

    Returns:
        Horizontal full-shadow length in the unit of the heights. Positive
        infinity when tan(angle) is within ``EPSILON`` of zero. Negative
        when the person is taller than the obstruction.

    Examples:
        >>> round(full_shadow_length(1000, 100, math.pi / 4), 6)
        900.0
        >>> full_shadow_length(1000, 100, 0)
        inf
    """
    tangent = math.tan(float(angle_rad))
    if approximately_equal(tangent, 0.0):
        return math.inf
    return abs(1.0 / tangent) * (float(h1) - float(h2))


def full_shadow_length_deg(h1: float, h2: float, angle_deg: float) -> float:
    """Same as :func:`full_shadow_length` with the angle in degrees."""
    return full_shadow_length(h1, h2, degrees_to_radians(angle_deg))


def fully_shaded_area(run_length: float, h1: float, h2: float, angle_rad: float) -> float:
    """Compute the fully shaded ground area behind a linear obstruction.

    Args:
        run_length: Length of the obstruction along its run (e.g. a wall).
        h1: Height of the obstruction.
        h2: Height of the person.
        angle_rad: Sun angle of incidence in radians.

    Returns:
        Area in squared length units, ``math.inf`` at the horizon.
    """
    return float(run_length) * full_shadow_length(h1, h2, angle_rad)


def fully_shaded_area_deg(run_length: float, h1: float, h2: float, angle_deg: float) -> float:
    """Same as :func:`fully_shaded_area` with the angle in degrees."""
    return fully_shaded_area(run_length, h1, h2, degrees_to_radians(angle_deg))


def full_shadow_lengths(h1: float, h2: float, angles_rad) -> np.ndarray:
    """Vectorized :func:`full_shadow_length` over an array of angles.

    Args:
        h1: Height of the obstruction.
        h2: Height of the person.
        angles_rad: Array-like of sun angles in radians.

    Returns:
        Array of full-shadow lengths with the same shape as ``angles_rad``.
    """
    angles = np.asarray(angles_rad, dtype=float)
    tangents = np.tan(angles)
    on_horizon = np.abs(tangents) < EPSILON

    # Dummy divisor on the horizon so the division never sees a zero
    safe = np.where(on_horizon, 1.0, tangents)
    lengths = np.abs(1.0 / safe) * (float(h1) - float(h2))
    return np.where(on_horizon, np.inf, lengths)
