from typing import Dict, Generic, List, Optional, TypeVar

from meetingsdk.config.key_value_store import KeyValueStore
from meetingsdk.utils.logger import create_logger

logger = create_logger("in_memory_store")

T = TypeVar("T")


class InMemoryKeyValueStore(KeyValueStore[T], Generic[T]):
    """
    Process-local key-value store.

    Useful for tests and for embedding the client where no external
    configuration store is available.
    """

    def __init__(self, initial: Optional[Dict[str, T]] = None) -> None:
        self._data: Dict[str, T] = dict(initial or {})
        logger.debug("Initialized in-memory store with %d keys", len(self._data))

    async def create_key(self, key: str, value: T, overwrite: bool = True) -> None:
        if key in self._data and not overwrite:
            raise KeyError(f"Key already exists: {key}")
        self._data[key] = value
        logger.debug("Stored key: %s", key)

    async def update_value(self, key: str, value: T) -> None:
        if key not in self._data:
            raise KeyError(f"Key does not exist: {key}")
        self._data[key] = value

    async def get_key(self, key: str) -> Optional[T]:
        return self._data.get(key)

    async def delete_key(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    async def get_all_keys(self) -> List[str]:
        return list(self._data.keys())
