"""
Shared pytest fixtures for the drainwatch test suite.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List

import pytest

from drainwatch.shared.models import BatteryReading

BASE_TIME = datetime(2019, 5, 17, 8, 0, tzinfo=timezone(timedelta(hours=1)))


def make_reading(
    serial: str,
    level: float,
    hours: float = 0.0,
    academy_id: int = 30006,
    employee_id: str = "EMP001",
) -> BatteryReading:
    """Build a reading taken `hours` after the base time."""
    timestamp = (BASE_TIME + timedelta(hours=hours)).isoformat(timespec="milliseconds")
    return BatteryReading(
        academy_id=academy_id,
        battery_level=level,
        employee_id=employee_id,
        serial_number=serial,
        timestamp=timestamp,
    )


def make_drain_device(serial: str, daily_rate: float, academy_id: int = 30006) -> List[BatteryReading]:
    """Two readings 24h apart that drain at the given daily rate."""
    return [
        make_reading(serial, 1.0, 0, academy_id=academy_id),
        make_reading(serial, 1.0 - daily_rate, 24, academy_id=academy_id),
    ]


@pytest.fixture
def reading_factory() -> Callable[..., BatteryReading]:
    return make_reading


@pytest.fixture
def sample_readings() -> List[BatteryReading]:
    """Two devices at one academy: one with three readings, one with two."""
    return [
        make_reading("DEVICE001", 1.0, 0),
        make_reading("DEVICE001", 0.9, 12),
        make_reading("DEVICE001", 0.8, 36, employee_id="EMP002"),
        make_reading("DEVICE002", 1.0, 0, employee_id="EMP003"),
        make_reading("DEVICE002", 0.95, 12, employee_id="EMP003"),
    ]


@pytest.fixture
def raw_records(sample_readings) -> List[Dict[str, Any]]:
    """The sample readings as camelCase JSON records."""
    return [r.to_dict() for r in sample_readings]
