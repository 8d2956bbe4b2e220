"""
Data Service for battery readings
Handles loading, validation, caching, filtering and pagination.
"""

import logging
import math
import time
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from drainwatch.shared.models import BatteryReading, parse_timestamp
from .sources.base import ReadingSource

logger = logging.getLogger(__name__)

# Requests at or above this limit are analysis requests: everything, unfiltered
ANALYSIS_LIMIT = 10000

LOW_BATTERY_LEVEL = 0.2
CRITICAL_BATTERY_LEVEL = 0.1

FALLBACK_READINGS = [
    BatteryReading(
        academy_id=30006,
        battery_level=0.68,
        employee_id="T1007384",
        serial_number="1805C67HD02259",
        timestamp="2019-05-17T07:47:25.833+01:00",
    ),
    BatteryReading(
        academy_id=30006,
        battery_level=0.51,
        employee_id="T1001417",
        serial_number="1805C67HD02332",
        timestamp="2019-05-17T07:48:49.147+01:00",
    ),
    BatteryReading(
        academy_id=30006,
        battery_level=0.98,
        employee_id="T1008250",
        serial_number="1805C67HD02009",
        timestamp="2019-05-17T07:50:35.158+01:00",
    ),
]


@dataclass
class FetchOptions:
    """Filter and pagination options for fetching readings"""
    page: int = 1
    limit: int = 100
    academy_id: Optional[int] = None
    employee_id: Optional[str] = None
    start_date: Optional[Union[str, datetime]] = None
    end_date: Optional[Union[str, datetime]] = None
    min_battery_level: Optional[float] = None
    max_battery_level: Optional[float] = None


@dataclass
class FetchResult:
    """One page of readings"""
    data: List[BatteryReading]
    total: int
    page: int
    limit: int
    has_more: bool


@dataclass
class AcademyStats:
    count: int
    avg_level: float


@dataclass
class BatteryStats:
    """Summary statistics over raw readings"""
    total_devices: int
    average_battery_level: float
    low_battery_count: int
    critical_battery_count: int
    academy_stats: Dict[int, AcademyStats] = field(default_factory=dict)


def validate_battery_reading(record: Any) -> bool:
    """Check that a raw record is a structurally valid battery reading."""
    if not isinstance(record, dict):
        return False

    academy_id = record.get("academyId")
    level = record.get("batteryLevel")

    if not isinstance(academy_id, int) or isinstance(academy_id, bool):
        return False
    if not isinstance(level, (int, float)) or isinstance(level, bool):
        return False
    if math.isnan(level) or not 0 <= level <= 1:
        return False
    for key in ("employeeId", "serialNumber", "timestamp"):
        if not isinstance(record.get(key), str):
            return False

    # The analysis compares readings as instants, so the offset is required
    try:
        recorded_at = parse_timestamp(record["timestamp"])
    except ValueError:
        return False
    return recorded_at.tzinfo is not None


def sanitize_battery_data(records: List[Any]) -> List[BatteryReading]:
    """Drop invalid records and convert the rest to readings."""
    readings = [BatteryReading.from_dict(r) for r in records if validate_battery_reading(r)]

    dropped = len(records) - len(readings)
    if dropped:
        logger.warning(f"Dropped {dropped} invalid battery records")
    return readings


def _to_instant(value: Union[str, datetime]) -> datetime:
    """Parse a filter date; naive values are taken as UTC."""
    instant = parse_timestamp(value) if isinstance(value, str) else value
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant


class DataService:
    """Fetches and caches battery readings with graceful error handling"""

    def __init__(self, source: ReadingSource, cache_duration: float = 300.0):
        self.source = source
        self.cache_duration = cache_duration
        self._cache: Optional[List[BatteryReading]] = None
        self._last_fetch_time: Optional[float] = None

    def _cache_is_fresh(self) -> bool:
        if self._cache is None or self._last_fetch_time is None:
            return False
        return time.monotonic() - self._last_fetch_time <= self.cache_duration

    def _load_battery_data(self):
        """Load readings from the source, falling back to built-in data on failure"""
        try:
            raw_data = self.source.load_raw()
            self._cache = sanitize_battery_data(raw_data)
            logger.info(f"Loaded {len(self._cache)} battery readings")
        except Exception as e:
            logger.error(f"Error loading battery data: {e}")
            self._cache = list(FALLBACK_READINGS)
        self._last_fetch_time = time.monotonic()

    def get_all_readings(self) -> List[BatteryReading]:
        """Get the full cached batch, reloading when stale"""
        if not self._cache_is_fresh():
            self._load_battery_data()

        if self._cache is None:
            raise RuntimeError("Failed to load battery data")
        return self._cache

    def close(self):
        """Close the underlying source"""
        self.source.close()

    def invalidate(self):
        """Drop the cached batch so the next fetch reloads"""
        self._cache = None
        self._last_fetch_time = None

    def fetch_battery_data(self, options: Optional[FetchOptions] = None) -> FetchResult:
        """Fetch readings with pagination and filtering"""
        options = options or FetchOptions()
        all_data = self.get_all_readings()

        if options.limit >= ANALYSIS_LIMIT:
            return FetchResult(
                data=list(all_data),
                total=len(all_data),
                page=1,
                limit=len(all_data),
                has_more=False,
            )

        filtered = self.filter_readings(options)

        start_index = (options.page - 1) * options.limit
        end_index = start_index + options.limit

        return FetchResult(
            data=filtered[start_index:end_index],
            total=len(filtered),
            page=options.page,
            limit=options.limit,
            has_more=end_index < len(filtered),
        )

    def filter_readings(self, options: Optional[FetchOptions] = None) -> List[BatteryReading]:
        """Every cached reading matching the filters, without paging"""
        options = options or FetchOptions()
        return [r for r in self.get_all_readings() if self._matches(r, options)]

    def _matches(self, reading: BatteryReading, options: FetchOptions) -> bool:
        if options.academy_id and reading.academy_id != options.academy_id:
            return False
        if options.employee_id and reading.employee_id != options.employee_id:
            return False
        if options.min_battery_level is not None and reading.battery_level < options.min_battery_level:
            return False
        if options.max_battery_level is not None and reading.battery_level > options.max_battery_level:
            return False
        if options.start_date and reading.recorded_at < _to_instant(options.start_date):
            return False
        if options.end_date and reading.recorded_at > _to_instant(options.end_date):
            return False
        return True

    def fetch_battery_stats(self, options: Optional[FetchOptions] = None) -> BatteryStats:
        """Summary statistics over all readings"""
        options = replace(options or FetchOptions(), limit=ANALYSIS_LIMIT)
        data = self.fetch_battery_data(options).data

        if not data:
            return BatteryStats(
                total_devices=0,
                average_battery_level=0.0,
                low_battery_count=0,
                critical_battery_count=0,
            )

        totals: Dict[int, List[float]] = {}
        for reading in data:
            totals.setdefault(reading.academy_id, []).append(reading.battery_level)

        return BatteryStats(
            total_devices=len({r.serial_number for r in data}),
            average_battery_level=sum(r.battery_level for r in data) / len(data),
            low_battery_count=sum(1 for r in data if r.battery_level < LOW_BATTERY_LEVEL),
            critical_battery_count=sum(1 for r in data if r.battery_level < CRITICAL_BATTERY_LEVEL),
            academy_stats={
                academy_id: AcademyStats(count=len(levels), avg_level=sum(levels) / len(levels))
                for academy_id, levels in totals.items()
            },
        )

    def fetch_device_data(
        self, serial_number: str, options: Optional[FetchOptions] = None
    ) -> List[BatteryReading]:
        """Readings for one device among the first 1000 matching readings"""
        options = replace(options or FetchOptions(), limit=1000)
        result = self.fetch_battery_data(options)
        return [r for r in result.data if r.serial_number == serial_number]

    def fetch_latest_readings(self, limit: int = 50) -> List[BatteryReading]:
        """Latest reading per device, newest first"""
        latest: Dict[str, BatteryReading] = {}
        for reading in self.get_all_readings():
            existing = latest.get(reading.serial_number)
            if existing is None or reading.recorded_at > existing.recorded_at:
                latest[reading.serial_number] = reading

        newest_first = sorted(latest.values(), key=lambda r: r.recorded_at, reverse=True)
        return newest_first[:limit]
