"""Reading sources for battery data."""

from typing import Optional

from drainwatch.shared.database import DBConfig
from .base import ReadingSource
from .file import JsonFileSource
from .http import HttpJsonSource
from .mysql import MySQLSource


def create_source(source_config, db_config: Optional[DBConfig] = None) -> ReadingSource:
    """Create a reading source from a SourceConfig.

    Raises:
        ValueError: If the source type is unknown or missing settings.
    """
    if source_config.type == "file":
        return JsonFileSource(source_config.path)
    if source_config.type == "http":
        if not source_config.url:
            raise ValueError("HTTP source requires a url")
        return HttpJsonSource(source_config.url, timeout=source_config.timeout)
    if source_config.type == "mysql":
        return MySQLSource(db_config or DBConfig.from_env(), table=source_config.table)
    raise ValueError(f"Unsupported source type: {source_config.type}")


__all__ = [
    "ReadingSource",
    "JsonFileSource",
    "HttpJsonSource",
    "MySQLSource",
    "create_source",
]
