"""
Heat pump estimate pipeline.

Runs the steps for one building submission in order:
heat loss -> weather lookup -> power heat loss -> package selection -> cost.

Usage:
    from eecalc.calculation import find_building, run_pipeline

    building = find_building(buildings, "4cb3820a-7bf6-47f9-8afc-3adcac8752cd")
    with create_weather_client() as client:
        result = run_pipeline(building, heat_pumps, client)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence
import logging

from ..core.models import BuildingRecord, HeatPumpPackage
from ..weather.errors import ClientError, ClientErrorKind
from .engine import (
    DEFAULT_VAT_RATE,
    WeatherSource,
    compute_heat_loss,
    compute_power_heat_loss,
    compute_total_cost,
)
from .selector import select_package

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """How far the pipeline got for a building."""
    COMPLETE = "complete"
    NO_PACKAGE = "no_package"                # no package covers the power heat loss
    REGION_NOT_FOUND = "region_not_found"    # weather API does not know the region


@dataclass
class PipelineResult:
    """Everything computed for one building submission."""
    building: BuildingRecord
    outcome: Outcome
    heat_loss: float
    power_heat_loss: Optional[float] = None
    package: Optional[HeatPumpPackage] = None
    total_cost: Optional[float] = None
    error: Optional[ClientError] = None

    @property
    def is_complete(self) -> bool:
        return self.outcome is Outcome.COMPLETE


def find_building(
    buildings: Iterable[BuildingRecord],
    submission_id: str,
) -> Optional[BuildingRecord]:
    """Look up a submission by ID; None when it does not exist."""
    for building in buildings:
        if building.submission_id == submission_id:
            return building
    return None


def run_pipeline(
    building: BuildingRecord,
    catalog: Sequence[HeatPumpPackage],
    client: WeatherSource,
    vat_rate: float = DEFAULT_VAT_RATE,
) -> PipelineResult:
    """
    Estimate heat pump cost for a building.

    An unknown design region produces a REGION_NOT_FOUND result carrying the
    heat loss, so a partial report can still be shown. Missing credentials
    and other client failures are raised to the caller.

    Raises:
        ClientError: MISSING_CREDENTIALS or GENERIC from the weather lookup
    """
    log_context = {
        "submission_id": building.submission_id,
        "region": building.design_region,
    }

    heat_loss = compute_heat_loss(building)
    logger.info("Heat loss %.2f", heat_loss, extra=log_context)

    try:
        power_heat_loss = compute_power_heat_loss(building, heat_loss, client)
    except ClientError as e:
        if e.kind is not ClientErrorKind.NOT_FOUND:
            raise
        logger.warning("Design region not found", extra=log_context)
        return PipelineResult(
            building=building,
            outcome=Outcome.REGION_NOT_FOUND,
            heat_loss=heat_loss,
            error=e,
        )
    logger.info("Power heat loss %.4f", power_heat_loss, extra=log_context)

    package = select_package(catalog, power_heat_loss)
    if package is None:
        logger.warning(
            "No heat pump package covers power heat loss %.4f", power_heat_loss,
            extra=log_context,
        )
        return PipelineResult(
            building=building,
            outcome=Outcome.NO_PACKAGE,
            heat_loss=heat_loss,
            power_heat_loss=power_heat_loss,
        )

    total_cost = compute_total_cost(package, vat_rate)
    logger.info("Recommended %s at %.2f", package.label, total_cost, extra=log_context)

    return PipelineResult(
        building=building,
        outcome=Outcome.COMPLETE,
        heat_loss=heat_loss,
        power_heat_loss=power_heat_loss,
        package=package,
        total_cost=total_cost,
    )
