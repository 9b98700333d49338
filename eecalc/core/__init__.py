"""Core models, configuration and credentials."""

from .config import Settings, settings, API_KEY_ENV_VAR
from .models import BuildingRecord, CostLineItem, HeatPumpPackage, LocationWeather

__all__ = [
    "Settings",
    "settings",
    "API_KEY_ENV_VAR",
    "BuildingRecord",
    "CostLineItem",
    "HeatPumpPackage",
    "LocationWeather",
]
