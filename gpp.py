"""GPP composition using pure psychrometric functions.

Exposes `calculate_gpp`, the public entry point, and `compute_gpp_details`,
which returns the same figure together with every intermediate.
"""
from __future__ import annotations

import logging
from typing import Optional

from config import config
from models import GppResult
from psychrometrics import (
    STANDARD_ATM_INHG,
    atmospheric_pressure,
    humidity_ratio,
    saturation_vapor_pressure,
)
from validator import InvalidElevationError, as_number, validate_arguments

logger = logging.getLogger(__name__)

PRECISION = 2
GRAINS_PER_POUND = 7000


def compute_gpp_details(
    dry_bulb_temp: float,
    rel_humidity: float,
    elevation: float = 0,
    *,
    use_elevation_pressure: Optional[bool] = None,
) -> GppResult:
    """Run the full pipeline and return a GppResult.

    Unless `use_elevation_pressure` is true (or enabled in config), the humidity
    ratio is taken at the standard atmosphere and elevation does not change
    the GPP.
    """
    dry_bulb_temp, rel_humidity = validate_arguments(dry_bulb_temp, rel_humidity)
    elevation = as_number("elevation", elevation)
    if use_elevation_pressure is None:
        use_elevation_pressure = config.USE_ELEVATION_PRESSURE

    if use_elevation_pressure:
        pressure = atmospheric_pressure(elevation)
        pressure_used = pressure
    else:
        # Reported only; left unset where the barometric formula is undefined
        try:
            pressure = atmospheric_pressure(elevation)
        except InvalidElevationError as e:
            logger.debug(f"Atmospheric pressure unavailable: {e}")
            pressure = None
        pressure_used = STANDARD_ATM_INHG
    wsat = saturation_vapor_pressure(dry_bulb_temp)
    ratio = humidity_ratio(dry_bulb_temp, rel_humidity, pressure_used, wsat=wsat)
    gpp = round(ratio * GRAINS_PER_POUND, PRECISION)

    logger.debug(
        f"T={dry_bulb_temp}F RH={rel_humidity}% h={elevation}m: "
        f"p_atm={pressure} inHg (used {pressure_used}), p_ws={wsat:.5f} inHg, W={ratio:.6f}, GPP={gpp}"
    )

    return GppResult(
        dry_bulb_temp=dry_bulb_temp,
        rel_humidity=rel_humidity,
        elevation=elevation,
        atmospheric_pressure_inhg=pressure,
        pressure_used_inhg=pressure_used,
        saturation_vapor_pressure_inhg=wsat,
        humidity_ratio=ratio,
        gpp=gpp,
        elevation_adjusted=bool(use_elevation_pressure),
    )


def calculate_gpp(
    dry_bulb_temp: float,
    rel_humidity: float,
    elevation: float = 0,
    *,
    use_elevation_pressure: Optional[bool] = None,
) -> float:
    """Grains of moisture per pound of dry air, rounded to 2 decimals.

    dry_bulb_temp: °F in [0, 120]; rel_humidity: % in [0, 100];
    elevation: meters above sea level. Raises OutOfRangeError on bad input.
    """
    return compute_gpp_details(
        dry_bulb_temp,
        rel_humidity,
        elevation,
        use_elevation_pressure=use_elevation_pressure,
    ).gpp
