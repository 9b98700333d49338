"""Bundled building submissions and heat pump catalog."""

from .loader import (
    DataLoadError,
    DEFAULT_BUILDINGS_FILE,
    DEFAULT_HEAT_PUMPS_FILE,
    load_buildings,
    load_heat_pumps,
)

__all__ = [
    "DataLoadError",
    "DEFAULT_BUILDINGS_FILE",
    "DEFAULT_HEAT_PUMPS_FILE",
    "load_buildings",
    "load_heat_pumps",
]
