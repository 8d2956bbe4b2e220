import logging
from typing import Any, Dict, List

from drainwatch.shared.database import BatteryReadingsStorage, DBConfig
from .base import ReadingSource

logger = logging.getLogger(__name__)


class MySQLSource(ReadingSource):
    """Loads reading records from the battery readings table."""

    def __init__(self, db_config: DBConfig, table: str = "battery_readings"):
        self.storage = BatteryReadingsStorage(db_config, table=table)
        logger.info(f"Initialized MySQLSource for {db_config.database}.{table}")

    def load_raw(self) -> List[Dict[str, Any]]:
        return self.storage.get_readings()

    def check_health(self) -> bool:
        return self.storage.ping()

    def close(self):
        self.storage.close()
