from __future__ import annotations
import math

from .models import RoundingType

# Digits kept when converting hours to interval units; 0.7 / 0.1 is 6.999999999999999 in binary.
UNIT_PRECISION = 9


def round_hours(hours: float, interval_minutes: float, mode: RoundingType | str = RoundingType.NEAREST) -> float:
    """Snap ``hours`` to a multiple of ``interval_minutes``.

    ``nearest`` rounds half up, so 7.875 hours on a 15 minute grid becomes 8.0.
    A value already on the grid is returned on the same grid point in every
    mode. An interval of 0 leaves the value untouched.
    """
    if interval_minutes == 0:
        return hours

    step = interval_minutes / 60
    units = round(hours / step, UNIT_PRECISION)
    mode = RoundingType(mode)
    if mode is RoundingType.UP:
        return math.ceil(units) * step
    if mode is RoundingType.DOWN:
        return math.floor(units) * step
    return math.floor(units + 0.5) * step
