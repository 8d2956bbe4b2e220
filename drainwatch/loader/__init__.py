"""Battery reading acquisition."""

from .data_service import (
    BatteryStats,
    DataService,
    FetchOptions,
    FetchResult,
    sanitize_battery_data,
    validate_battery_reading,
)
from .settings import Config, SourceConfig, load_config
from .sources import create_source


def build_data_service(config: Config) -> DataService:
    """Create a data service reading from the configured source."""
    source = create_source(config.source, config.db_config)
    return DataService(source, cache_duration=config.cache_duration)


__all__ = [
    "BatteryStats",
    "Config",
    "DataService",
    "FetchOptions",
    "FetchResult",
    "SourceConfig",
    "build_data_service",
    "load_config",
    "sanitize_battery_data",
    "validate_battery_reading",
]
