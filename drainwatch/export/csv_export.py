"""CSV export of battery readings, statistics and analysis summaries."""

import csv
import logging
from datetime import date
from pathlib import Path
from typing import Optional, Sequence, Union

from drainwatch.analysis.formatting import format_percentage
from drainwatch.loader.data_service import BatteryStats, DataService, FetchOptions
from drainwatch.shared.models import BatteryAnalysisResult, BatteryReading

logger = logging.getLogger(__name__)

READING_HEADERS = ["Academy ID", "Employee ID", "Serial Number", "Battery Level", "Timestamp"]
SCHOOL_HEADERS = [
    "Academy ID",
    "Priority",
    "Devices",
    "Critical",
    "Warning",
    "Healthy",
    "Unknown",
    "Worst Daily Usage",
]

PathLike = Union[str, Path]


def _dated_filename(prefix: str, today: Optional[date] = None) -> str:
    return f"{prefix}-{(today or date.today()).isoformat()}.csv"


def export_to_csv(data: Sequence[BatteryReading], path: PathLike) -> Optional[Path]:
    """Write readings to a CSV file.

    Args:
        data: Readings to export.
        path: Destination file.

    Returns:
        The written path, or None when there was nothing to export.
    """
    if not data:
        logger.warning("No data to export")
        return None

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(READING_HEADERS)
        for row in data:
            writer.writerow([
                row.academy_id,
                row.employee_id,
                row.serial_number,
                f"{row.battery_level * 100:.2f}%",
                row.timestamp,
            ])

    logger.info(f"Exported {len(data)} readings to {path}")
    return path


def export_stats(stats: BatteryStats, directory: PathLike, today: Optional[date] = None) -> Path:
    """Write summary statistics to battery-stats-<date>.csv."""
    path = Path(directory) / _dated_filename("battery-stats", today)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["Metric", "Value"])
        writer.writerow(["Total Devices", stats.total_devices])
        writer.writerow(["Average Battery Level", f"{stats.average_battery_level * 100:.2f}%"])
        writer.writerow(["Low Battery Count", stats.low_battery_count])
        writer.writerow(["Critical Battery Count", stats.critical_battery_count])

    return path


def export_school_summary(result: BatteryAnalysisResult, path: PathLike) -> Path:
    """Write one row per school, in ranked order, plus a totals row."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(SCHOOL_HEADERS)
        for school in result.schools:
            worst = max((d.daily_usage_rate for d in school.devices), default=0.0)
            writer.writerow([
                school.academy_id,
                school.priority.value,
                len(school.devices),
                school.critical_devices,
                school.warning_devices,
                school.healthy_devices,
                school.unknown_devices,
                format_percentage(worst),
            ])
        writer.writerow([
            "Total",
            "",
            result.total_devices,
            result.total_critical,
            result.total_warning,
            result.total_healthy,
            result.total_unknown,
            "",
        ])

    return path


def export_filtered_data(
    service: DataService,
    filters: Optional[FetchOptions],
    directory: PathLike,
    today: Optional[date] = None,
) -> Optional[Path]:
    """Fetch readings with the given filters and export them.

    Raises:
        RuntimeError: If fetching or writing fails.
    """
    try:
        # Paging options are ignored; every matching reading is written
        data = service.filter_readings(filters)
        path = Path(directory) / _dated_filename("battery-data", today)
        return export_to_csv(data, path)
    except Exception as e:
        logger.error(f"Export failed: {e}")
        raise RuntimeError("Failed to export data") from e
