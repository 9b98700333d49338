"""Heat pump package recommendation."""

from typing import Iterable, Optional

from ..core.models import HeatPumpPackage


def select_package(
    catalog: Iterable[HeatPumpPackage],
    power_heat_loss: float,
) -> Optional[HeatPumpPackage]:
    """
    Pick the smallest package that covers the power heat loss.

    Packages with output capacity below the power heat loss are discarded.
    Of the rest the lowest capacity wins; equal capacities keep catalog
    order (sorted() is stable). Returns None when no package is big enough.
    """
    applicable = [
        package for package in catalog
        if package.output_capacity >= power_heat_loss
    ]
    if not applicable:
        return None
    return sorted(applicable, key=lambda package: package.output_capacity)[0]
