"""
Pydantic models for heat pump cost estimation.

Covers the building submissions and heat pump catalog (bundled datasets,
camelCase keys) and the weather data returned by the remote API.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    """Immutable record accepting both field names and camelCase aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


# =============================================================================
# BUILDING SUBMISSIONS
# =============================================================================


class BuildingRecord(_Record):
    """A building submission awaiting a heat pump estimate."""

    submission_id: str = Field(alias="submissionId")
    design_region: str = Field(alias="designRegion", description="Weather lookup key")
    floor_area: float = Field(alias="floorArea", gt=0, description="m²")
    age: str = Field(default="", description="Construction age band, informational")
    heating_factor: float = Field(alias="heatingFactor", gt=0)
    insulation_factor: float = Field(alias="insulationFactor", gt=0)


# =============================================================================
# HEAT PUMP CATALOG
# =============================================================================


class CostLineItem(_Record):
    label: str
    cost: float = Field(ge=0)


class HeatPumpPackage(_Record):
    """A heat pump package with its itemized installation costs."""

    label: str
    output_capacity: float = Field(alias="outputCapacity", gt=0, description="kW")
    costs: tuple[CostLineItem, ...] = ()


# =============================================================================
# WEATHER API
# =============================================================================


class LocationWeather(_Record):
    """
    Weather data for a design region.

    The API sends numbers as strings; pydantic parses them to floats and
    rejects anything that is not numeric or not finite.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    location: str
    degree_days: float = Field(alias="degreeDays")
    ground_temp: float = Field(alias="groundTemp")
    postcode: str
    lat: float
    lng: float
