"""
Retry policy for calls to the weather data API.

Describes when a failed request is worth repeating and how long to wait
before the next attempt. The HTTP loop itself lives in the client; this
module only holds the policy so it can be configured and tested alone.

Usage:
    from eecalc.utils.retry import RetryConfig, calculate_delay

    config = RetryConfig(max_attempts=5, base_delay=0.1)
    calculate_delay(1, config)   # 0.1
    calculate_delay(3, config)   # 0.4
"""

import random
from dataclasses import dataclass
from typing import Optional, Tuple
import logging

logger = logging.getLogger(__name__)


@dataclass
class RetryConfig:
    """Configuration for retry behavior."""

    max_attempts: int = 5  # total attempts, first one included
    base_delay: float = 0.1  # seconds
    max_delay: Optional[float] = None  # seconds, None = uncapped
    exponential_base: float = 2.0
    jitter: bool = False
    retryable_status_codes: Tuple[int, ...] = (429, 500, 502, 503, 504, 418)


DEFAULT_RETRY_CONFIG = RetryConfig()


def calculate_delay(retry_number: int, config: RetryConfig) -> float:
    """
    Calculate delay before a retry.

    Args:
        retry_number: Which retry this is (1 for the first retry)
        config: Retry configuration

    Returns:
        Delay in seconds
    """
    if retry_number < 1:
        raise ValueError(f"retry_number must be >= 1, got {retry_number}")

    delay = config.base_delay * (config.exponential_base ** (retry_number - 1))
    if config.max_delay is not None:
        delay = min(delay, config.max_delay)

    if config.jitter:
        # Add up to 25% random jitter
        delay = delay * (1 + random.uniform(0, 0.25))

    return delay


def is_retryable_status(status_code: int, config: RetryConfig) -> bool:
    """Check if an HTTP status code is worth retrying."""
    return status_code in config.retryable_status_codes


def attempts_remaining(attempts_made: int, config: RetryConfig) -> bool:
    """Check whether another attempt is allowed after `attempts_made`."""
    return attempts_made < config.max_attempts
