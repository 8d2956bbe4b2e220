import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .base import ReadingSource

logger = logging.getLogger(__name__)


class JsonFileSource(ReadingSource):
    """Reads a JSON array of reading records from disk."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        logger.info(f"Initialized JsonFileSource for {self.path}")

    def load_raw(self) -> List[Dict[str, Any]]:
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array in {self.path}, got {type(data).__name__}")
        return data

    def check_health(self) -> bool:
        return self.path.is_file()
