"""Core data models for battery readings and analysis results."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing 'Z' for UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


class DeviceStatus(Enum):
    """Health tier of a device."""
    CRITICAL = "critical"
    WARNING = "warning"
    HEALTHY = "healthy"
    UNKNOWN = "unknown"


class SchoolPriority(Enum):
    """Visit priority of a school."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class BatteryReading:
    """A single battery observation from a handheld device.

    Battery level is a fraction of full charge (1.0 = full).
    """
    academy_id: int
    battery_level: float
    employee_id: str
    serial_number: str
    timestamp: str

    @property
    def recorded_at(self) -> datetime:
        """Timestamp as an offset-aware datetime."""
        return parse_timestamp(self.timestamp)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "academyId": self.academy_id,
            "batteryLevel": self.battery_level,
            "employeeId": self.employee_id,
            "serialNumber": self.serial_number,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BatteryReading":
        """Create a reading from a camelCase record."""
        return cls(
            academy_id=data["academyId"],
            battery_level=float(data["batteryLevel"]),
            employee_id=data["employeeId"],
            serial_number=data["serialNumber"],
            timestamp=data["timestamp"],
        )


@dataclass
class DeviceAnalysis:
    """Drain analysis for one device."""
    serial_number: str
    status: DeviceStatus
    daily_usage_rate: float  # fraction of full charge per day
    last_reading: Optional[BatteryReading]
    readings: List[BatteryReading]
    academy_id: int
    employee_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "serialNumber": self.serial_number,
            "status": self.status.value,
            "dailyUsageRate": self.daily_usage_rate,
            "lastReading": self.last_reading.to_dict() if self.last_reading else None,
            "readings": [r.to_dict() for r in self.readings],
            "academyId": self.academy_id,
            "employeeId": self.employee_id,
        }


@dataclass
class SchoolAnalysis:
    """Device health counts and visit priority for one school."""
    academy_id: int
    devices: List[DeviceAnalysis]
    critical_devices: int
    warning_devices: int
    healthy_devices: int
    unknown_devices: int
    priority: SchoolPriority

    def to_dict(self) -> Dict[str, Any]:
        return {
            "academyId": self.academy_id,
            "devices": [d.to_dict() for d in self.devices],
            "criticalDevices": self.critical_devices,
            "warningDevices": self.warning_devices,
            "healthyDevices": self.healthy_devices,
            "unknownDevices": self.unknown_devices,
            "priority": self.priority.value,
        }


@dataclass
class BatteryAnalysisResult:
    """Top-level result of a battery analysis run."""
    schools: List[SchoolAnalysis] = field(default_factory=list)
    total_devices: int = 0
    total_critical: int = 0
    total_warning: int = 0
    total_healthy: int = 0
    total_unknown: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON export."""
        return {
            "schools": [s.to_dict() for s in self.schools],
            "totalDevices": self.total_devices,
            "totalCritical": self.total_critical,
            "totalWarning": self.total_warning,
            "totalHealthy": self.total_healthy,
            "totalUnknown": self.total_unknown,
        }
