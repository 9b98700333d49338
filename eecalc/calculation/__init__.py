"""
Calculation Module - heat loss, package sizing and installation cost.

Features:
- Building heat loss from floor area and empirical factors
- Power heat loss from design-region degree-days
- Smallest adequate heat pump package
- VAT-inclusive installation cost
"""

from .engine import (
    DEFAULT_VAT_RATE,
    compute_heat_loss,
    compute_power_heat_loss,
    compute_total_cost,
)
from .selector import select_package
from .pipeline import Outcome, PipelineResult, find_building, run_pipeline

__all__ = [
    'DEFAULT_VAT_RATE',
    'compute_heat_loss',
    'compute_power_heat_loss',
    'compute_total_cost',
    'select_package',
    'Outcome',
    'PipelineResult',
    'find_building',
    'run_pipeline',
]
