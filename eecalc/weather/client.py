"""
Weather data API client.

Fetches degree-days and location details for a design region. All weather
lookups in eecalc go through this client.

Features:
- Connection reuse via requests.Session (one pooled socket per client)
- Exponential backoff on rate limits and gateway/server errors
- Failure classification into ClientError kinds
- Per-call failure record for diagnostics

Usage:
    from eecalc.weather import create_weather_client

    with create_weather_client() as client:
        weather = client.resolve_weather("Severn Valley (Filton)")
        print(weather.degree_days)
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import urlencode, urljoin

import requests
from pydantic import ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..core.config import Settings, settings as default_settings
from ..core.credentials import get_api_key
from ..core.models import LocationWeather
from ..utils.retry import (
    RetryConfig,
    attempts_remaining,
    calculate_delay,
    is_retryable_status,
)
from .errors import ClientError

logger = logging.getLogger(__name__)


class Endpoint(str, Enum):
    WEATHER = "weather"


@dataclass
class RequestFailure:
    """One failed attempt, kept for diagnostics."""
    attempt: int
    error: str
    status_code: Optional[int] = None
    retry_delay: Optional[float] = None  # None when the failure was terminal


@dataclass
class WeatherClientConfig:
    """Settings the client needs to talk to the weather API."""
    api_key: Optional[str]
    version: str = "v1"
    base_url: str = "https://063qqrtqth.execute-api.eu-west-2.amazonaws.com"
    # One request at a time per client, so a single pooled socket is enough
    pool_connections: int = 1
    pool_maxsize: int = 1
    connect_timeout: float = 10.0
    read_timeout: float = 30.0
    retry: RetryConfig = field(default_factory=RetryConfig)

    @classmethod
    def from_settings(cls, settings: Settings, api_key: Optional[str]) -> "WeatherClientConfig":
        return cls(
            api_key=api_key,
            version=settings.api_version,
            base_url=settings.api_url,
            connect_timeout=settings.connect_timeout,
            read_timeout=settings.read_timeout,
            retry=RetryConfig(
                max_attempts=settings.max_attempts,
                base_delay=settings.retry_base_delay,
                max_delay=settings.retry_max_delay,
            ),
        )


class WeatherClient:
    """
    Client for the weather data API.

    Retries are handled here rather than by urllib3 so that each failed
    attempt can be classified and recorded. A 404 means the API does not know
    the region and is never retried; statuses in the retry policy are retried
    with doubling delays until the attempt cap; everything else fails at once.
    """

    API_KEY_HEADER = "x-api-key"

    def __init__(
        self,
        config: WeatherClientConfig,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the weather client.

        Args:
            config: API location, credential and transport settings
            session: Pre-built session (defaults to a pooled requests.Session)
            sleep: Called with the backoff delay in seconds between attempts
        """
        self.config = config
        self.failures: List[RequestFailure] = []
        self._sleep = sleep

        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(
                pool_connections=config.pool_connections,
                pool_maxsize=config.pool_maxsize,
                max_retries=Retry(total=0),  # retries are handled in _get
                pool_block=True,
            )
            session.mount("https://", adapter)
            session.mount("http://", adapter)
        self._session = session

    def __enter__(self) -> "WeatherClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()

    def resolve_weather(self, region: str) -> LocationWeather:
        """
        Get weather data for a design region.

        Raises:
            ClientError: MISSING_CREDENTIALS when no API key is configured,
                NOT_FOUND when the API does not know the region, GENERIC for
                any other unrecoverable failure
        """
        payload = self._get(Endpoint.WEATHER, {"location": region})
        try:
            weather = LocationWeather.model_validate(payload["location"])
        except (KeyError, TypeError, ValidationError) as e:
            self.failures.append(
                RequestFailure(attempt=len(self.failures) + 1, error=f"malformed response: {e}")
            )
            logger.error("Malformed weather response for %s: %s", region, e, extra={"region": region})
            raise ClientError.generic(f"malformed weather response for {region}") from e

        logger.debug(
            "Weather for %s: %.1f degree-days", region, weather.degree_days,
            extra={"region": region},
        )
        return weather

    def build_url(self, endpoint: Endpoint, params: Optional[Dict[str, str]] = None) -> str:
        """Build `{base}/{version}/{endpoint}?{params}`."""
        base = self.config.base_url.rstrip("/") + "/"
        url = urljoin(base, f"{self.config.version.strip('/')}/{endpoint.value}")
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    def _get(self, endpoint: Endpoint, params: Dict[str, str]) -> Any:
        """
        GET an endpoint with retry and backoff.

        Returns:
            Decoded JSON body
        """
        self.failures = []
        if not self.config.api_key:
            logger.error("Weather API key is not configured")
            raise ClientError.missing_credentials()

        url = self.build_url(endpoint, params)
        headers = {
            self.API_KEY_HEADER: self.config.api_key,
            "Accept": "application/json",
        }
        retry = self.config.retry
        context = params.get("location", endpoint.value)
        attempt = 0

        while True:
            attempt += 1
            logger.debug(
                "Weather request attempt %d/%d: %s", attempt, retry.max_attempts, url,
                extra={"attempt": attempt},
            )

            try:
                response = self._session.get(
                    url,
                    headers=headers,
                    timeout=(self.config.connect_timeout, self.config.read_timeout),
                )
            except requests.RequestException as e:
                self._record(attempt, f"{type(e).__name__}: {e}")
                raise ClientError.generic(f"request failed: {e}") from e

            status = response.status_code

            # Success
            if response.ok:
                try:
                    return response.json()
                except ValueError as e:
                    self._record(attempt, "response body is not JSON", status)
                    raise ClientError.generic("response body is not JSON", status_code=status) from e

            # Unknown region - never retried
            if status == 404:
                self._record(attempt, "not found", status)
                raise ClientError.not_found(context)

            # Rate limit / server error - retry with backoff
            if is_retryable_status(status, retry) and attempts_remaining(attempt, retry):
                delay = calculate_delay(attempt, retry)
                self._record(attempt, f"HTTP {status}", status, retry_delay=delay)
                self._sleep(delay)
                continue

            self._record(attempt, f"HTTP {status}", status)
            if is_retryable_status(status, retry):
                logger.error("All %d weather request attempts failed", attempt)
            raise ClientError.generic(f"HTTP {status}", status_code=status)

    def _record(
        self,
        attempt: int,
        error: str,
        status_code: Optional[int] = None,
        retry_delay: Optional[float] = None,
    ) -> None:
        """Keep and log a failed attempt."""
        self.failures.append(
            RequestFailure(
                attempt=attempt,
                error=error,
                status_code=status_code,
                retry_delay=retry_delay,
            )
        )
        extra = {"attempt": attempt}
        if status_code is not None:
            extra["status_code"] = status_code

        if retry_delay is not None:
            logger.warning(
                "Weather request failed (%s), retrying in %.2fs", error, retry_delay,
                extra=extra,
            )
        else:
            logger.warning("Weather request failed (%s)", error, extra=extra)


def create_weather_client(
    settings: Optional[Settings] = None,
    api_key: Optional[str] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> WeatherClient:
    """
    Build a weather client from settings and the stored API key.

    The caller owns the client and should close it (or use it as a context
    manager) when the run is over.

    Raises:
        ClientError: MISSING_CREDENTIALS if no API key is available
    """
    settings = settings or default_settings
    if api_key is None:
        api_key = get_api_key(settings.env_file)
    if not api_key:
        raise ClientError.missing_credentials()

    config = WeatherClientConfig.from_settings(settings, api_key)
    return WeatherClient(config, sleep=sleep)
