"""
Reference data loader.

Reads building submissions and the heat pump catalog from JSON files into
Pydantic models. Defaults to the datasets bundled with the package.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..core.models import BuildingRecord, HeatPumpPackage

DATA_DIR = Path(__file__).parent
DEFAULT_BUILDINGS_FILE = DATA_DIR / "houses.json"
DEFAULT_HEAT_PUMPS_FILE = DATA_DIR / "heat-pumps.json"

_buildings_adapter = TypeAdapter(tuple[BuildingRecord, ...])
_heat_pumps_adapter = TypeAdapter(tuple[HeatPumpPackage, ...])


class DataLoadError(ValueError):
    """Raised when a reference dataset is missing or malformed."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


def load_json(file_path: str | Path) -> Any:
    """Load raw JSON from file."""
    path = Path(file_path)
    if not path.exists():
        raise DataLoadError(f"Data file not found: {path}", path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Invalid JSON in {path}: {e}", path) from e


def load_buildings(file_path: str | Path | None = None) -> tuple[BuildingRecord, ...]:
    """
    Load building submissions.

    Args:
        file_path: JSON array of submissions (defaults to the bundled houses.json)
    """
    path = Path(file_path) if file_path else DEFAULT_BUILDINGS_FILE
    try:
        return _buildings_adapter.validate_python(load_json(path))
    except ValidationError as e:
        raise DataLoadError(f"Invalid building data in {path}: {e}", path) from e


def load_heat_pumps(file_path: str | Path | None = None) -> tuple[HeatPumpPackage, ...]:
    """
    Load the heat pump package catalog.

    Args:
        file_path: JSON array of packages (defaults to the bundled heat-pumps.json)
    """
    path = Path(file_path) if file_path else DEFAULT_HEAT_PUMPS_FILE
    try:
        return _heat_pumps_adapter.validate_python(load_json(path))
    except ValidationError as e:
        raise DataLoadError(f"Invalid heat pump data in {path}: {e}", path) from e
