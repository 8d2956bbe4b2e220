"""Battery drain analysis engine."""

from .engine import (
    analyze_battery_data,
    calculate_device_daily_usage,
    calculate_school_priority,
    classify_device_status,
    group_by_device,
    group_by_school,
)
from .formatting import format_date, format_percentage

__all__ = [
    "analyze_battery_data",
    "calculate_device_daily_usage",
    "calculate_school_priority",
    "classify_device_status",
    "group_by_device",
    "group_by_school",
    "format_date",
    "format_percentage",
]
