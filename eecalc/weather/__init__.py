"""
Weather data API access.

Resolves design regions to degree-days through the remote weather API.
"""

from .client import (
    Endpoint,
    RequestFailure,
    WeatherClient,
    WeatherClientConfig,
    create_weather_client,
)
from .errors import ClientError, ClientErrorKind

__all__ = [
    "Endpoint",
    "RequestFailure",
    "WeatherClient",
    "WeatherClientConfig",
    "create_weather_client",
    "ClientError",
    "ClientErrorKind",
]
