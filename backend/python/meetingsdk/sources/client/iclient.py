from abc import ABC, abstractmethod
from typing import Any


class IClient(ABC):
    """Common interface for source clients"""

    @abstractmethod
    def get_client(self) -> Any:
        """Return the underlying client object"""
