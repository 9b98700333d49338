"""Utility modules."""

from .logging_config import (
    get_logger,
    setup_logging,
    ensure_logging,
    EecalcFormatter,
    FileFormatter,
)
from .retry import (
    RetryConfig,
    DEFAULT_RETRY_CONFIG,
    calculate_delay,
    is_retryable_status,
    attempts_remaining,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "ensure_logging",
    "EecalcFormatter",
    "FileFormatter",
    # Retry
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
    "calculate_delay",
    "is_retryable_status",
    "attempts_remaining",
]
