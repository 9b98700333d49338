"""
Pytest configuration and fixtures for eecalc tests.

Provides reusable test fixtures for:
- Building submissions
- Heat pump catalog
- Weather data and fake weather clients
- Canned HTTP responses
"""

import json

import pytest
import requests

from eecalc.core.config import API_KEY_ENV_VAR
from eecalc.core.models import BuildingRecord, HeatPumpPackage, LocationWeather


# =============================================================================
# ENVIRONMENT
# =============================================================================

@pytest.fixture(autouse=True)
def no_api_key_in_env(monkeypatch):
    """Start every test without an API key in the environment.

    setenv first so monkeypatch restores the variable's absence afterwards,
    even when set_api_key writes os.environ directly.
    """
    monkeypatch.setenv(API_KEY_ENV_VAR, "placeholder")
    monkeypatch.delenv(API_KEY_ENV_VAR)


# =============================================================================
# BUILDING FIXTURES
# =============================================================================

@pytest.fixture
def house() -> BuildingRecord:
    """1967-75 house in the Severn Valley, 125 m²."""
    return BuildingRecord(
        submissionId="4cb3820a-7bf6-47f9-8afc-3adcac8752cd",
        designRegion="Severn Valley (Filton)",
        floorArea=125,
        age="1967 - 1975",
        heatingFactor=101,
        insulationFactor=1.3,
    )


# =============================================================================
# HEAT PUMP FIXTURES
# =============================================================================

def _package(kw: int, components_cost: float) -> HeatPumpPackage:
    return HeatPumpPackage.model_validate({
        "label": f"{kw}kW Package",
        "outputCapacity": kw,
        "costs": [
            {
                "label": f"Design & Supply of your Air Source Heat Pump System Components ({kw}kW)",
                "cost": components_cost,
            },
            {"label": "Installation of your Air Source Heat Pump and Hot Water Cylinder", "cost": 2900},
            {"label": "Supply & Installation of your Homely Smart Thermostat", "cost": 150},
            {"label": "Supply & Installation of a new Consumer Unit", "cost": 300},
            {"label": "MCS System Commissioning & HIES Insurance-backed Warranty", "cost": 1648},
        ],
    })


@pytest.fixture
def heat_pumps() -> list[HeatPumpPackage]:
    """Catalog deliberately out of capacity order: 8, 5, 16, 12 kW."""
    return [
        _package(8, 4216),
        _package(5, 3947),
        _package(16, 5421),
        _package(12, 5138),
    ]


@pytest.fixture
def eight_kw_package(heat_pumps) -> HeatPumpPackage:
    return heat_pumps[0]


# =============================================================================
# WEATHER FIXTURES
# =============================================================================

@pytest.fixture
def weather_payload() -> dict:
    """Weather API body; numbers arrive as strings."""
    return {
        "location": {
            "location": "Severn Valley (Filton)",
            "degreeDays": "200",
            "groundTemp": "10",
            "postcode": "BS7",
            "lat": "51.507",
            "lng": "-2.576",
        }
    }


class FakeWeatherClient:
    """Stands in for WeatherClient; returns fixed weather or raises."""

    def __init__(self, degree_days: float = 200, error: Exception | None = None):
        self.degree_days = degree_days
        self.error = error
        self.regions: list[str] = []

    def resolve_weather(self, region: str) -> LocationWeather:
        self.regions.append(region)
        if self.error is not None:
            raise self.error
        return LocationWeather(
            location=region,
            degreeDays=self.degree_days,
            groundTemp=10,
            postcode="SW1A 1AA",
            lat=51.5033,
            lng=-0.1276,
        )

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False


@pytest.fixture
def fake_weather_client() -> FakeWeatherClient:
    return FakeWeatherClient()


# =============================================================================
# HTTP FIXTURES
# =============================================================================

@pytest.fixture
def make_response():
    """Build a requests.Response with a status code and optional JSON body."""

    def _make(status_code: int, body=None, raw: bytes | None = None) -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response.url = "https://weather.example/v1/weather"
        if raw is not None:
            response._content = raw
        else:
            response._content = json.dumps(body if body is not None else {}).encode()
        return response

    return _make
