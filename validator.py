"""Input validation and error types for the GPP calculator.

Every check here runs before any derived quantity is computed, so a failed
call never leaves a partially evaluated pipeline behind.
"""
from __future__ import annotations

import math
from numbers import Real
from typing import Tuple

TEMP_RANGE_F: Tuple[float, float] = (0.0, 120.0)
RH_RANGE_PCT: Tuple[float, float] = (0.0, 100.0)


class PsychrometricError(ValueError):
    """Base class for calculator errors."""


class OutOfRangeError(PsychrometricError):
    """An input fell outside its accepted range."""

    def __init__(self, parameter: str, value: float, minimum: float, maximum: float):
        self.parameter = parameter
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"{parameter} must be between {minimum:g} and {maximum:g} (got {value!r})"
        )


class DegenerateSaturationError(PsychrometricError):
    """Atmospheric pressure is at or below the saturation vapor pressure."""

    def __init__(self, atmospheric_pressure: float, saturation_pressure: float):
        self.atmospheric_pressure = atmospheric_pressure
        self.saturation_pressure = saturation_pressure
        super().__init__(
            f"atmospheric pressure {atmospheric_pressure:.3f} inHg must exceed "
            f"saturation vapor pressure {saturation_pressure:.3f} inHg"
        )


class InvalidElevationError(PsychrometricError):
    """Elevation lies beyond the reach of the barometric formula."""

    def __init__(self, elevation: float):
        self.elevation = elevation
        super().__init__(f"barometric formula is undefined at elevation {elevation!r} m")


def as_number(name: str, value) -> float:
    """Convert an int/float argument to float, rejecting bools and non-numbers."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a real number, not {type(value).__name__}")
    return float(value)


def _check_range(name: str, value: float, bounds: Tuple[float, float]) -> None:
    lo, hi = bounds
    # NaN fails both comparisons, so test the accepted interval directly
    if not (math.isfinite(value) and lo <= value <= hi):
        raise OutOfRangeError(name, value, lo, hi)


def validate_arguments(dry_bulb_temp, rel_humidity) -> Tuple[float, float]:
    """Validate temperature (°F) and relative humidity (%).

    Humidity is checked before temperature. Returns both values as floats.
    """
    dry_bulb_temp = as_number("dry_bulb_temp", dry_bulb_temp)
    rel_humidity = as_number("rel_humidity", rel_humidity)
    _check_range("rel_humidity", rel_humidity, RH_RANGE_PCT)
    _check_range("dry_bulb_temp", dry_bulb_temp, TEMP_RANGE_F)
    return dry_bulb_temp, rel_humidity
