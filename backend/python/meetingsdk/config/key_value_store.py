from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class KeyValueStore(ABC, Generic[T]):
    """Interface for the key-value stores backing ConfigurationService."""

    @abstractmethod
    async def create_key(self, key: str, value: T, overwrite: bool = True) -> None:
        """Create a key, replacing an existing value when overwrite is set.

        Raises:
            KeyError: If the key exists and overwrite is False
        """

    @abstractmethod
    async def update_value(self, key: str, value: T) -> None:
        """Update the value of an existing key.

        Raises:
            KeyError: If the key does not exist
        """

    @abstractmethod
    async def get_key(self, key: str) -> Optional[T]:
        """Return the value for key, or None when it is absent."""

    @abstractmethod
    async def delete_key(self, key: str) -> bool:
        """Delete key and report whether it existed."""

    @abstractmethod
    async def get_all_keys(self) -> List[str]:
        """Return every key held by the store."""

    async def close(self) -> None:
        """Release store resources."""
        return None
