"""Shared utilities for drainwatch."""

from .models import (
    BatteryAnalysisResult,
    BatteryReading,
    DeviceAnalysis,
    DeviceStatus,
    SchoolAnalysis,
    SchoolPriority,
)
from .database import DBConfig, BatteryReadingsStorage
from .config import load_yaml_config, get_config_path
from .logging import setup_logging

__all__ = [
    "BatteryAnalysisResult",
    "BatteryReading",
    "DeviceAnalysis",
    "DeviceStatus",
    "SchoolAnalysis",
    "SchoolPriority",
    "DBConfig",
    "BatteryReadingsStorage",
    "load_yaml_config",
    "get_config_path",
    "setup_logging",
]
