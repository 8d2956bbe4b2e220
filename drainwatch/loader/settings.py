"""Configuration for loading battery readings."""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from drainwatch.shared.config import find_config_file, get_log_level, load_yaml_config
from drainwatch.shared.database import DBConfig

SOURCE_TYPES = ("file", "http", "mysql")


@dataclass
class SourceConfig:
    """Where battery readings come from."""
    type: str = "file"
    path: str = "data/battery.json"
    url: Optional[str] = None
    table: str = "battery_readings"
    timeout: float = 30.0  # seconds, http only

    @classmethod
    def from_dict(cls, data: dict) -> "SourceConfig":
        """Create config from dictionary."""
        source_type = data.get("type", "file")
        if source_type not in SOURCE_TYPES:
            raise ValueError(f"Unsupported source type: {source_type}")

        return cls(
            type=source_type,
            path=data.get("path", "data/battery.json"),
            url=data.get("url"),
            table=data.get("table", "battery_readings"),
            timeout=data.get("timeout", 30.0),
        )


@dataclass
class Config:
    """Main configuration container."""
    db_config: DBConfig
    source: SourceConfig = field(default_factory=SourceConfig)
    cache_duration: float = 300.0  # seconds
    page_size: int = 100
    export_dir: str = "exports"
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: dict, db_config: Optional[DBConfig] = None) -> "Config":
        """Create config from dictionary."""
        return cls(
            db_config=db_config or DBConfig.from_env(),
            source=SourceConfig.from_dict(data.get("source", {})),
            cache_duration=data.get("cache_duration", 300.0),
            page_size=data.get("page_size", 100),
            export_dir=data.get("export_dir", "exports"),
            log_level=get_log_level(data),
        )


def load_config(path: Optional[str] = None) -> Config:
    """Load configuration from YAML file with environment variable support.

    Args:
        path: Path to a YAML config file. If not provided, uses
            config/config-{env}.yaml at the repo root, then the current
            directory. Without any config file, defaults are used.

    Returns:
        Config instance.

    Raises:
        FileNotFoundError: If an explicit path doesn't exist.
    """
    load_dotenv()

    config_path = find_config_file(path)
    data = load_yaml_config(config_path, load_env=False) if config_path else {}

    config = Config.from_dict(data)

    # Environment variable overrides
    if data_path := os.environ.get("DRAINWATCH_DATA_PATH"):
        config.source.type = "file"
        config.source.path = data_path
    if data_url := os.environ.get("DRAINWATCH_DATA_URL"):
        config.source.type = "http"
        config.source.url = data_url
    if log_level := os.environ.get("LOG_LEVEL"):
        config.log_level = log_level.upper()

    return config
