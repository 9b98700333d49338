"""Report rendering for heat pump estimates."""

from .text_report import (
    format_currency,
    format_number,
    render_client_error,
    render_degraded_report,
    render_report,
    render_result,
    MISSING_CREDENTIALS_MESSAGE,
    NO_PACKAGE_MESSAGE,
    REGION_NOT_FOUND_WARNING,
)

__all__ = [
    "format_currency",
    "format_number",
    "render_client_error",
    "render_degraded_report",
    "render_report",
    "render_result",
    "MISSING_CREDENTIALS_MESSAGE",
    "NO_PACKAGE_MESSAGE",
    "REGION_NOT_FOUND_WARNING",
]
