"""Display formatting helpers."""

from datetime import datetime


def format_percentage(value: float) -> str:
    """Format a fraction as a percentage with one decimal place."""
    return f"{value * 100:.1f}%"


def format_date(date: datetime) -> str:
    """Format a datetime like "May 17, 2019, 07:47 AM"."""
    return f"{date:%b} {date.day}, {date.year}, {date:%I:%M %p}"
