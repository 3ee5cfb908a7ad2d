"""
Unit conversions from OpenSky SI units to aviation display units.

OpenSky reports altitude in meters and speeds in m/s. The public API
speaks feet, knots and feet-per-minute. Missing values count as zero.
"""

import math
from typing import Optional

FEET_PER_METER = 3.28084
KNOTS_PER_MPS = 1.94384
FPM_PER_MPS = 196.85


def _round_half_up(value: float) -> int:
    """Round to nearest integer, halves away from zero."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def meters_to_feet(meters: Optional[float]) -> int:
    """Barometric altitude in meters to feet."""
    return _round_half_up((meters or 0) * FEET_PER_METER)


def mps_to_knots(velocity: Optional[float]) -> int:
    """Ground speed in m/s to knots."""
    return _round_half_up((velocity or 0) * KNOTS_PER_MPS)


def mps_to_fpm(vertical_rate: Optional[float]) -> int:
    """Vertical rate in m/s to feet per minute (positive = climb)."""
    return _round_half_up((vertical_rate or 0) * FPM_PER_MPS)
