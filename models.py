"""
Pydantic models for the GPP calculator
"""

from typing import Optional

from pydantic import BaseModel, Field


class GppRequest(BaseModel):
    """One set of calculator inputs"""
    dry_bulb_temp: float = Field(..., description="Dry-bulb temperature (°F)")
    rel_humidity: float = Field(..., description="Relative humidity (%)")
    elevation: float = Field(0.0, description="Elevation above sea level (m)")


class GppResult(BaseModel):
    """GPP with the intermediates that produced it"""
    dry_bulb_temp: float
    rel_humidity: float
    elevation: float
    atmospheric_pressure_inhg: Optional[float] = Field(
        ..., description="Elevation-adjusted pressure, 3 decimals; None where the formula is undefined"
    )
    pressure_used_inhg: float = Field(..., description="Pressure fed into the humidity ratio")
    saturation_vapor_pressure_inhg: float
    humidity_ratio: float = Field(..., description="lb water per lb dry air")
    gpp: float = Field(..., description="Grains of water per pound of dry air, 2 decimals")
    elevation_adjusted: bool = False
