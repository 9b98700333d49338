"""
Plain-text cost report.

Layout of a full report:

    --------------------------------------
    <submission id>
    --------------------------------------
      Estimate Heat Loss: 16412.5
      Design Region: Severn Valley (Filton)
      Power Heat Loss: 5.8
      Recommended Heat Pump: 8kW Package
      Cost Breakdown:
        Supply & Installation of your Homely Smart Thermostat £150.00
        ...
      Total Cost, including VAT: £9,676.80

A building whose design region the weather API does not know gets the
header and heat loss only, followed by a warning line.
"""

from typing import Optional

from ..calculation.pipeline import Outcome, PipelineResult
from ..core.models import BuildingRecord, HeatPumpPackage
from ..weather.errors import ClientError, ClientErrorKind

RULE = "-" * 38
INDENT = "  "

MISSING_CREDENTIALS_MESSAGE = "Credentials missing, please use set-api-key command"
REGION_NOT_FOUND_WARNING = "Warning: Could not find design region"
NO_PACKAGE_MESSAGE = "No recommended heat pump found"
GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


def format_currency(amount: float, symbol: str = "£") -> str:
    """Format as `£1,648.00`: leading symbol, thousands separators, two decimals."""
    return f"{symbol}{amount:,.2f}"


def format_number(value: float) -> str:
    """Whole numbers print without `.0`; anything else prints as is."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _render_header(building: BuildingRecord, heat_loss: float) -> list[str]:
    return [
        RULE,
        building.submission_id,
        RULE,
        f"{INDENT}Estimate Heat Loss: {format_number(heat_loss)}",
    ]


def render_report(
    building: BuildingRecord,
    heat_loss: float,
    power_heat_loss: float,
    package: HeatPumpPackage,
    total_cost: float,
    currency_symbol: str = "£",
) -> str:
    """Render the full cost report for a building."""
    lines = _render_header(building, heat_loss)
    lines += [
        f"{INDENT}Design Region: {building.design_region}",
        f"{INDENT}Power Heat Loss: {format_number(power_heat_loss)}",
        f"{INDENT}Recommended Heat Pump: {package.label}",
        f"{INDENT}Cost Breakdown:",
    ]
    for item in package.costs:
        lines.append(f"{INDENT * 2}{item.label} {format_currency(item.cost, currency_symbol)}")
    lines.append(
        f"{INDENT}Total Cost, including VAT: {format_currency(total_cost, currency_symbol)}"
    )
    return "\n".join(lines)


def render_degraded_report(building: BuildingRecord, heat_loss: float) -> str:
    """Render the partial report shown when the design region is unknown."""
    lines = _render_header(building, heat_loss)
    lines.append(f"{INDENT}{REGION_NOT_FOUND_WARNING}")
    return "\n".join(lines)


def render_client_error(
    error: ClientError,
    building: Optional[BuildingRecord] = None,
    heat_loss: Optional[float] = None,
) -> str:
    """
    Text for a weather client failure.

    NOT_FOUND becomes the degraded report when the building and heat loss
    are known. GENERIC keeps the error text for diagnostics and has no
    partial report.
    """
    if error.kind is ClientErrorKind.MISSING_CREDENTIALS:
        return MISSING_CREDENTIALS_MESSAGE
    if error.kind is ClientErrorKind.NOT_FOUND and building is not None and heat_loss is not None:
        return render_degraded_report(building, heat_loss)
    return f"{GENERIC_ERROR_MESSAGE}: {error}"


def render_result(result: PipelineResult, currency_symbol: str = "£") -> str:
    """Render a pipeline result whatever its outcome."""
    if result.outcome is Outcome.REGION_NOT_FOUND:
        return render_degraded_report(result.building, result.heat_loss)
    if result.outcome is Outcome.NO_PACKAGE:
        return NO_PACKAGE_MESSAGE
    return render_report(
        result.building,
        result.heat_loss,
        result.power_heat_loss,
        result.package,
        result.total_cost,
        currency_symbol=currency_symbol,
    )
