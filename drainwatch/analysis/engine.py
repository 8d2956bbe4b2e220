"""Battery drain analysis.

Turns a batch of battery readings into per-device drain rates and health
tiers, then rolls devices up into schools ranked by how urgently they need
a visit.
"""

from typing import Dict, Iterable, List, Sequence

from drainwatch.shared.models import (
    BatteryAnalysisResult,
    BatteryReading,
    DeviceAnalysis,
    DeviceStatus,
    SchoolAnalysis,
    SchoolPriority,
)

# Daily drain thresholds (fraction of full charge per day)
CRITICAL_DAILY_RATE = 0.30
WARNING_DAILY_RATE = 0.25

SECONDS_PER_HOUR = 3600.0


def analyze_battery_data(data: Iterable[BatteryReading]) -> BatteryAnalysisResult:
    """Analyze battery readings to find schools and devices needing attention.

    Args:
        data: Battery readings in any order.

    Returns:
        Analysis result with schools sorted by critical device count.
    """
    device_groups = group_by_device(data)

    # Process devices by serial so the result doesn't depend on input order
    device_analyses = [
        calculate_device_daily_usage(serial_number, device_groups[serial_number])
        for serial_number in sorted(device_groups)
    ]

    school_groups = group_by_school(device_analyses)
    schools = [
        calculate_school_priority(academy_id, devices)
        for academy_id, devices in school_groups.items()
    ]

    # sorted() is stable: ties keep aggregation order
    sorted_schools = sorted(schools, key=lambda s: s.critical_devices, reverse=True)

    counts = _count_by_status(device_analyses)

    return BatteryAnalysisResult(
        schools=sorted_schools,
        total_devices=len(device_analyses),
        total_critical=counts[DeviceStatus.CRITICAL],
        total_warning=counts[DeviceStatus.WARNING],
        total_healthy=counts[DeviceStatus.HEALTHY],
        total_unknown=counts[DeviceStatus.UNKNOWN],
    )


def group_by_device(data: Iterable[BatteryReading]) -> Dict[str, List[BatteryReading]]:
    """Group readings by device serial number, keeping input order."""
    groups: Dict[str, List[BatteryReading]] = {}
    for reading in data:
        groups.setdefault(reading.serial_number, []).append(reading)
    return groups


def group_by_school(device_analyses: Iterable[DeviceAnalysis]) -> Dict[int, List[DeviceAnalysis]]:
    """Group device analyses by academy id.

    Devices without an academy id are left out.
    """
    groups: Dict[int, List[DeviceAnalysis]] = {}
    for device in device_analyses:
        academy_id = device.last_reading.academy_id if device.last_reading else None
        if academy_id:
            groups.setdefault(academy_id, []).append(device)
    return groups


def calculate_device_daily_usage(
    serial_number: str,
    readings: Sequence[BatteryReading],
) -> DeviceAnalysis:
    """Calculate the daily battery usage rate for a single device.

    The rate is a time-weighted average over discharge intervals only. Any
    interval where the level stayed flat or rose (the device was charged) is
    left out entirely, both its consumption and its duration.

    Args:
        serial_number: Device serial number.
        readings: All readings for the device, in any order.

    Returns:
        Device analysis with status and daily usage rate.
    """
    if len(readings) < 2:
        first = readings[0] if readings else None
        return DeviceAnalysis(
            serial_number=serial_number,
            status=DeviceStatus.UNKNOWN,
            daily_usage_rate=0.0,
            last_reading=first,
            readings=list(readings),
            academy_id=first.academy_id if first else 0,
            employee_id=first.employee_id if first else "",
        )

    sorted_readings = sorted(readings, key=lambda r: r.recorded_at)

    total_consumption = 0.0
    total_hours = 0.0

    for current, next_reading in zip(sorted_readings, sorted_readings[1:]):
        consumption = current.battery_level - next_reading.battery_level

        # Battery level went up or stayed put: device was charged
        if consumption <= 0:
            continue

        duration = next_reading.recorded_at - current.recorded_at
        total_consumption += consumption
        total_hours += duration.total_seconds() / SECONDS_PER_HOUR

    daily_usage_rate = (total_consumption / total_hours) * 24 if total_hours > 0 else 0.0

    last_reading = sorted_readings[-1]

    return DeviceAnalysis(
        serial_number=serial_number,
        status=classify_device_status(daily_usage_rate),
        daily_usage_rate=daily_usage_rate,
        last_reading=last_reading,
        readings=sorted_readings,
        academy_id=last_reading.academy_id,
        employee_id=last_reading.employee_id,
    )


def classify_device_status(daily_usage_rate: float) -> DeviceStatus:
    """Classify device status from its daily usage rate."""
    # TODO: a zero rate lumps "no drain observed" together with "only
    # charging intervals"; split these once the report can show both.
    if daily_usage_rate == 0:
        return DeviceStatus.UNKNOWN
    if daily_usage_rate > CRITICAL_DAILY_RATE:
        return DeviceStatus.CRITICAL
    if daily_usage_rate > WARNING_DAILY_RATE:
        return DeviceStatus.WARNING
    return DeviceStatus.HEALTHY


def calculate_school_priority(academy_id: int, devices: List[DeviceAnalysis]) -> SchoolAnalysis:
    """Count device tiers for a school and derive its visit priority."""
    counts = _count_by_status(devices)
    critical = counts[DeviceStatus.CRITICAL]
    warning = counts[DeviceStatus.WARNING]

    if critical >= 2:
        priority = SchoolPriority.HIGH
    elif critical == 1 or warning >= 3:
        priority = SchoolPriority.MEDIUM
    else:
        priority = SchoolPriority.LOW

    return SchoolAnalysis(
        academy_id=academy_id,
        devices=devices,
        critical_devices=critical,
        warning_devices=warning,
        healthy_devices=counts[DeviceStatus.HEALTHY],
        unknown_devices=counts[DeviceStatus.UNKNOWN],
        priority=priority,
    )


def _count_by_status(devices: Iterable[DeviceAnalysis]) -> Dict[DeviceStatus, int]:
    counts = {status: 0 for status in DeviceStatus}
    for device in devices:
        counts[device.status] += 1
    return counts
