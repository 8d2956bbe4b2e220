"""Database configuration and battery readings storage."""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

import pymysql
from pymysql.cursors import DictCursor

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    """Database connection configuration."""
    host: str
    user: str
    password: str
    database: str

    @classmethod
    def from_env(cls) -> "DBConfig":
        """Create config from environment variables."""
        return cls(
            host=os.getenv("DB_HOST", "localhost"),
            user=os.getenv("DB_USER", ""),
            password=os.getenv("DB_PASSWORD", ""),
            database=os.getenv("DB_DATABASE", "battery"),
        )


class BatteryReadingsStorage:
    """Reads battery readings from MySQL.

    Rows are returned in the camelCase record shape used by the JSON
    exports, so they go through the same validation as any other source.
    """

    def __init__(self, db_config: DBConfig, table: str = "battery_readings"):
        """Initialize storage with database configuration.

        Args:
            db_config: Database connection configuration.
            table: Table holding one row per reading.
        """
        if not table.replace("_", "").isalnum():
            raise ValueError(f"Invalid table name: {table}")
        self.db_config = db_config
        self.table = table
        self._connection: Optional[pymysql.Connection] = None

    def _get_connection(self) -> pymysql.Connection:
        """Get or create database connection."""
        if self._connection is None or not self._connection.open:
            self._connection = pymysql.connect(
                host=self.db_config.host,
                user=self.db_config.user,
                password=self.db_config.password,
                database=self.db_config.database,
                cursorclass=DictCursor,
            )
        return self._connection

    def get_readings(self) -> List[Dict[str, Any]]:
        """Get every reading in the table, oldest first.

        Raises:
            pymysql.MySQLError: If the query fails.
        """
        conn = self._get_connection()

        query = f"""
            SELECT academy_id, battery_level, employee_id, serial_number, recorded_at
            FROM {self.table}
            ORDER BY recorded_at
        """

        with conn.cursor() as cursor:
            cursor.execute(query)
            rows = cursor.fetchall()

        return [
            {
                "academyId": row["academy_id"],
                "batteryLevel": float(row["battery_level"]),
                "employeeId": row["employee_id"],
                "serialNumber": row["serial_number"],
                "timestamp": _format_timestamp(row["recorded_at"]),
            }
            for row in rows
        ]

    def ping(self) -> bool:
        """Check that the database is reachable."""
        try:
            self._get_connection().ping(reconnect=True)
            return True
        except pymysql.MySQLError as e:
            logger.error(f"Database ping failed: {e}")
            return False

    def close(self):
        """Close the database connection."""
        if self._connection:
            self._connection.close()
            self._connection = None


def _format_timestamp(value: Any) -> Any:
    # DATETIME columns come back naive; treat them as UTC
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.isoformat() + "+00:00"
        return value.isoformat()
    return value
