import logging
from dataclasses import asdict, dataclass
from typing import Optional

import httpx  # type: ignore

from meetingsdk.config.configuration_service import ConfigurationService
from meetingsdk.config.constants.service import MeetingDefaults, config_node_constants
from meetingsdk.sources.client.http.http_client import HTTPClient
from meetingsdk.sources.client.iclient import IClient


class MeetingRESTClientViaAccessToken(HTTPClient):
    """Meeting REST client.

    The meeting service authenticates each call with an ``X-Access-Token``
    header supplied per request, so no client-wide credentials are held.

    Args:
        base_url: The endpoint of the meeting service
        timeout: Request timeout in seconds
        transport: Optional httpx transport
    """

    def __init__(
        self,
        base_url: str = MeetingDefaults.BASE_URL.value,
        timeout: float = MeetingDefaults.TIMEOUT.value,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(timeout=timeout, transport=transport, logger=logger)
        self.base_url = base_url.rstrip("/")

    def get_base_url(self) -> str:
        """Get the base URL"""
        return self.base_url

    def service_url(self, *parts: str) -> str:
        """Join path parts onto the base URL"""
        return "/".join([self.base_url, *parts])


@dataclass
class MeetingConfig:
    """Configuration for the meeting REST client
    Args:
        base_url: The endpoint of the meeting service
        timeout: Request timeout in seconds
    """

    base_url: str = MeetingDefaults.BASE_URL.value
    timeout: float = MeetingDefaults.TIMEOUT.value

    def create_client(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> MeetingRESTClientViaAccessToken:
        return MeetingRESTClientViaAccessToken(self.base_url, self.timeout, transport=transport)

    def to_dict(self) -> dict:
        """Convert the configuration to a dictionary"""
        return asdict(self)


class MeetingClient(IClient):
    """Builder class for meeting REST clients"""

    def __init__(self, client: MeetingRESTClientViaAccessToken) -> None:
        """Initialize with a meeting REST client object"""
        self.client = client

    def get_client(self) -> MeetingRESTClientViaAccessToken:
        """Return the meeting REST client object"""
        return self.client

    @classmethod
    def build_with_config(
        cls,
        config: MeetingConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "MeetingClient":
        """Build MeetingClient with configuration
        Args:
            config: MeetingConfig instance
            transport: Optional httpx transport passed to the REST client
        Returns:
            MeetingClient instance
        """
        return cls(config.create_client(transport=transport))

    @classmethod
    async def build_from_services(
        cls,
        logger: logging.Logger,
        config_service: ConfigurationService,
    ) -> "MeetingClient":
        """Build MeetingClient using the configuration service
        Args:
            logger: Logger instance
            config_service: Configuration service instance
        Returns:
            MeetingClient instance
        """
        conf = await config_service.get_config(config_node_constants.MEETING.value) or {}
        base_url = conf.get("baseUrl") or MeetingDefaults.BASE_URL.value
        timeout = float(conf.get("timeout", MeetingDefaults.TIMEOUT.value))

        logger.debug(f"Building meeting client for {base_url}")
        return cls(MeetingRESTClientViaAccessToken(base_url, timeout, logger=logger))
