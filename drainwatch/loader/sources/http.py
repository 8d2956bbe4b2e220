import asyncio
import logging
from typing import Any, Dict, List

import aiohttp

from .base import ReadingSource

logger = logging.getLogger(__name__)


class HttpJsonSource(ReadingSource):
    """Fetches a JSON array of reading records over HTTP."""

    def __init__(self, url: str, timeout: float = 30.0):
        self.url = url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        logger.info(f"Initialized HttpJsonSource for {url}")

    async def _fetch_json(self) -> Any:
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            async with session.get(self.url) as response:
                response.raise_for_status()
                # Static file servers don't always send application/json
                return await response.json(content_type=None)

    async def _fetch_status(self) -> int:
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            async with session.head(self.url) as response:
                return response.status

    def load_raw(self) -> List[Dict[str, Any]]:
        data = asyncio.run(self._fetch_json())

        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array from {self.url}, got {type(data).__name__}")
        return data

    def check_health(self) -> bool:
        try:
            return asyncio.run(self._fetch_status()) < 400
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Health check failed for {self.url}: {e}")
            return False
