"""Services package."""
from flexbalance.services import (
    balance_service,
    cache_service,
    calendar_range,
    day_classifier,
    extra_settings_service,
    holiday_service,
    reference_service,
    report_formatter,
    schedule_service,
    stats_service,
)

__all__ = [
    "balance_service",
    "cache_service",
    "calendar_range",
    "day_classifier",
    "extra_settings_service",
    "holiday_service",
    "reference_service",
    "report_formatter",
    "schedule_service",
    "stats_service",
]
