import os
from typing import Union

import dotenv
from cachetools import LRUCache

from meetingsdk.config.constants.service import config_node_constants
from meetingsdk.config.key_value_store import KeyValueStore

dotenv.load_dotenv()

ConfigValue = Union[str, int, float, bool, dict, list, None]


class ConfigurationService:
    """Service to manage configuration on top of a key-value store with caching."""

    def __init__(self, logger, key_value_store: KeyValueStore, cache_size: int = 1000) -> None:
        self.logger = logger
        self.logger.debug("🔧 Initializing ConfigurationService")

        self.cache = LRUCache(maxsize=cache_size)
        self.logger.debug("📦 Initialized LRU cache with max size %d", cache_size)

        self.store = key_value_store
        self.logger.debug("✅ ConfigurationService initialized successfully")

    async def get_config(self, key: str, default: ConfigValue = None, use_cache: bool = True) -> ConfigValue:
        """Get configuration value with LRU cache and environment variable fallback"""
        if use_cache and key in self.cache:
            self.logger.debug("📦 Cache hit for key: %s", key)
            return self.cache[key]

        value = await self.store.get_key(key)
        if value is None:
            env_fallback = self._get_env_fallback(key)
            if env_fallback is not None:
                self.logger.debug("📦 Using environment variable fallback for key: %s", key)
                self.cache[key] = env_fallback
                return env_fallback

            self.logger.debug("📦 Cache miss for key: %s", key)
            return default

        self.cache[key] = value
        return value

    def _get_env_fallback(self, key: str) -> Union[dict, None]:
        """Get environment variable fallback for specific configuration keys"""
        if key == config_node_constants.MEETING.value:
            base_url = os.getenv("MEETING_BASE_URL")
            if base_url:
                config = {"baseUrl": base_url}
                timeout = os.getenv("MEETING_TIMEOUT")
                if timeout:
                    config["timeout"] = float(timeout)
                return config
        return None

    async def set_config(self, key: str, value: ConfigValue) -> bool:
        """Set configuration value and refresh the cache"""
        try:
            await self.store.create_key(key, value, overwrite=True)
        except KeyError as e:
            self.logger.error("❌ Failed to set config %s: %s", key, str(e))
            return False

        self.cache[key] = value
        self.logger.debug("✅ Successfully set config for key: %s", key)
        return True

    async def delete_config(self, key: str) -> bool:
        """Delete configuration value"""
        success = await self.store.delete_key(key)
        self.cache.pop(key, None)
        if success:
            self.logger.debug("✅ Successfully deleted config for key: %s", key)
        else:
            self.logger.warning("⚠️ Config key %s was not present", key)
        return success

    def clear_cache(self) -> None:
        """Clear the entire in-memory LRU cache."""
        self.cache.clear()
        self.logger.info("📦 In-memory configuration cache cleared")

    async def close(self) -> None:
        """Shut down the configuration service and release resources."""
        await self.store.close()
        self.logger.debug("✅ ConfigurationService closed successfully")
