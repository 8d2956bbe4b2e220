"""Base class for battery reading sources."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class ReadingSource(ABC):
    """Base class for all reading sources.

    Sources return raw records; validation happens in the data service.
    """

    @abstractmethod
    def load_raw(self) -> List[Dict[str, Any]]:
        """Load every raw reading record the source holds."""
        pass

    @abstractmethod
    def check_health(self) -> bool:
        """Basic health check - can we reach the source?"""
        pass

    def close(self):
        """Release any connection the source holds."""
