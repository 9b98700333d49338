"""
eecalc CLI.

Command-line interface for heat pump installation cost estimates.

Usage:
    eecalc set-api-key
    eecalc calculate <submission-id>
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from . import __version__
from .calculation import Outcome, compute_heat_loss, find_building, run_pipeline
from .core.config import settings
from .core.credentials import set_api_key
from .data import DataLoadError, load_buildings, load_heat_pumps
from .reporting import NO_PACKAGE_MESSAGE, render_client_error, render_result
from .utils.logging_config import ensure_logging
from .weather import ClientError, create_weather_client

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="eecalc",
    help="Evergreen Earth location efficiency calculator",
    add_completion=False,
)
console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def _print_error(text: str) -> None:
    err_console.print(text, markup=False)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"eecalc {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True,
        help="Show version and exit",
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="DEBUG, INFO, WARNING or ERROR (default: EECALC_LOG_LEVEL)",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also write DEBUG-level JSON-lines logs to this file",
    ),
):
    """
    Estimate heat pump installation costs for building submissions.
    """
    ensure_logging(log_level, log_file)


@app.command("set-api-key")
def set_api_key_command():
    """
    Store the weather data API key.
    """
    api_key = typer.prompt("Enter your Weather Data API key", hide_input=True)
    try:
        path = set_api_key(api_key, settings.env_file)
    except ValueError as e:
        _print_error(str(e))
        raise typer.Exit(1)
    console.print(f"[green]API key saved[/green] to {path}")


@app.command()
def calculate(
    submission_id: str = typer.Argument(..., help="Building submission ID"),
    buildings_file: Optional[Path] = typer.Option(
        None, "--buildings", help="Building submissions JSON (default: bundled data)",
    ),
    heat_pumps_file: Optional[Path] = typer.Option(
        None, "--heat-pumps", help="Heat pump catalog JSON (default: bundled data)",
    ),
):
    """
    Recommend a heat pump package for a submission and print its cost.
    """
    try:
        buildings = load_buildings(buildings_file or settings.buildings_file)
        heat_pumps = load_heat_pumps(heat_pumps_file or settings.heat_pumps_file)
    except DataLoadError as e:
        _print_error(str(e))
        raise typer.Exit(1)

    building = find_building(buildings, submission_id)
    if building is None:
        _print_error("Submission not found")
        raise typer.Exit(1)

    try:
        client = create_weather_client(settings)
    except ClientError as e:
        _print_error(render_client_error(e))
        raise typer.Exit(1)

    with client:
        try:
            result = run_pipeline(building, heat_pumps, client, vat_rate=settings.vat_rate)
        except ClientError as e:
            # NOT_FOUND comes back as a REGION_NOT_FOUND result, not here
            logger.error(
                "Weather lookup failed: %s", e,
                extra={"submission_id": building.submission_id, "region": building.design_region},
            )
            _print_error(render_client_error(e, building, compute_heat_loss(building)))
            raise typer.Exit(1)
        except Exception:
            logger.exception("Unexpected failure for submission %s", submission_id)
            raise

    if result.outcome is Outcome.NO_PACKAGE:
        _print_error(NO_PACKAGE_MESSAGE)
        raise typer.Exit(1)

    console.print(render_result(result, settings.currency_symbol), markup=False)


if __name__ == "__main__":
    app()
