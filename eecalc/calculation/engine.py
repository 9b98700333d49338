"""
Heat loss and cost calculations.

Metrics:
- Heat loss: floor area x heating factor x insulation factor
- Power heat loss: heat loss / degree-days for the design region
- Total cost: package line items x (1 + VAT)
"""

from typing import Protocol
import logging

from ..core.models import BuildingRecord, HeatPumpPackage, LocationWeather
from ..weather.errors import ClientError

logger = logging.getLogger(__name__)

DEFAULT_VAT_RATE = 0.05


class WeatherSource(Protocol):
    def resolve_weather(self, region: str) -> LocationWeather: ...


def compute_heat_loss(building: BuildingRecord) -> float:
    """Estimated heat loss of a building."""
    return building.floor_area * building.heating_factor * building.insulation_factor


def compute_power_heat_loss(
    building: BuildingRecord,
    heat_loss: float,
    client: WeatherSource,
) -> float:
    """
    Normalize heat loss by the degree-days of the building's design region.

    Args:
        building: Building submission
        heat_loss: Result of compute_heat_loss
        client: Weather client used for the region lookup

    Returns:
        Power heat loss

    Raises:
        ClientError: From the weather lookup, unchanged; GENERIC when the
            region reports non-positive degree-days
    """
    weather = client.resolve_weather(building.design_region)

    if weather.degree_days <= 0:
        logger.error(
            "Design region %s reports %s degree-days",
            building.design_region, weather.degree_days,
            extra={"submission_id": building.submission_id, "region": building.design_region},
        )
        raise ClientError.generic(
            f"non-positive degree-days ({weather.degree_days}) for {building.design_region}"
        )

    return heat_loss / weather.degree_days


def compute_total_cost(package: HeatPumpPackage, vat_rate: float = DEFAULT_VAT_RATE) -> float:
    """Sum of the package's line items with VAT applied once to the total."""
    subtotal = sum(item.cost for item in package.costs)
    return subtotal * (1 + vat_rate)
