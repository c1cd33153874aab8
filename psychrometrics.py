"""Psychrometric primitives in inch-pound units – pure functions.

Saturation vapor pressure follows the ASHRAE correlation published by
R. Wilkinson, P.E. (August 1994). Local pressure uses the standard-atmosphere
barometric formula. These functions avoid side effects and logging and are
suitable for unit/property tests.
"""
from __future__ import annotations

import math
from typing import Optional

from validator import DegenerateSaturationError, InvalidElevationError

# Standard atmosphere (inHg); also the scale of the saturation correlation
STANDARD_ATM_INHG = 29.921

# Fahrenheit -> absolute (K) via Rankine
RANKINE_OFFSET = 459.688
RANKINE_PER_KELVIN = 1.8

# Water: steam point and triple point (K)
STEAM_POINT_K = 373.16
TRIPLE_POINT_K = 273.16

# Saturation over liquid water (ta > triple point)
A1 = -7.90298
A2 = 5.02808
A3 = -1.3816e-7
A4 = 11.344
A5 = 8.1328e-3
A6 = -3.49149

# Saturation over ice (ta <= triple point)
B1 = -9.09718
B2 = -3.56654
B3 = 0.876793
B4 = 0.0060273

# Barometric formula
SEA_LEVEL_PRESSURE_PA = 101325.0
LAPSE_RATE_K_PER_M = 0.0065
SEA_LEVEL_TEMP_K = 288.15
GRAVITY_M_S2 = 9.8
GAS_CONSTANT_DRY_AIR = 287.05  # J/(kg·K)
PA_PER_INHG = 3386.389
PRESSURE_DECIMALS = 3

# Molecular weight ratio, water vapor / dry air
MW_RATIO = 0.62198


def saturation_vapor_pressure(temp_f: float) -> float:
    """Saturation vapor pressure (inHg) at dry-bulb temperature in °F.

    Above the triple point the liquid-water branch applies; at or below it the
    ice branch, whose last term is the constant log10(B4). No rounding.
    """
    ta = (temp_f + RANKINE_OFFSET) / RANKINE_PER_KELVIN
    if ta > TRIPLE_POINT_K:
        z = STEAM_POINT_K / ta
        p1 = (z - 1) * A1
        p2 = math.log10(z) * A2
        p3 = (10 ** ((1 - 1 / z) * A4) - 1) * A3
        p4 = (10 ** (A6 * (z - 1)) - 1) * A5
    else:
        z = TRIPLE_POINT_K / ta
        p1 = B1 * (z - 1)
        p2 = B2 * math.log10(z)
        p3 = B3 * (1 - 1 / z)
        p4 = math.log10(B4)
    return STANDARD_ATM_INHG * 10 ** (p1 + p2 + p3 + p4)


def atmospheric_pressure(elevation_m: float = 0.0) -> float:
    """Local atmospheric pressure (inHg, 3 decimals) at elevation in meters.

    p = p0 * (1 - L*h/T0) ** (g / (R*L))
    """
    base = 1 - LAPSE_RATE_K_PER_M * elevation_m / SEA_LEVEL_TEMP_K
    if not base > 0:
        raise InvalidElevationError(elevation_m)
    exponent = GRAVITY_M_S2 / (GAS_CONSTANT_DRY_AIR * LAPSE_RATE_K_PER_M)
    pressure_pa = SEA_LEVEL_PRESSURE_PA * base ** exponent
    return round(pressure_pa / PA_PER_INHG, PRESSURE_DECIMALS)


def humidity_ratio(
    temp_f: float,
    rh_percent: float,
    atm_inhg: float = STANDARD_ATM_INHG,
    wsat: Optional[float] = None,
) -> float:
    """Humidity ratio W (lb water / lb dry air) at temperature and RH.

    Uses the standard 29.921 inHg pressure unless another is given. `wsat`
    takes an already computed saturation vapor pressure for `temp_f`.
    """
    if wsat is None:
        wsat = saturation_vapor_pressure(temp_f)
    if atm_inhg - wsat <= 0:
        raise DegenerateSaturationError(atm_inhg, wsat)
    wtemp = MW_RATIO * (wsat / (atm_inhg - wsat))
    return rh_percent * wtemp / 100
