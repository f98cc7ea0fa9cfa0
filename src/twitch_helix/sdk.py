"""Twitch SDK - High-level entry point for the Helix API."""

import logging
from typing import Optional

import httpx

from twitch_helix.config import DEFAULT_API_URL, Config
from twitch_helix.exceptions import ConfigurationError
from twitch_helix.models.game import Game, GameList
from twitch_helix.models.stream import Stream, StreamList
from twitch_helix.services.helix_client import HelixClient

logger = logging.getLogger(__name__)


class Twitch:
    """High-level client for the Twitch Helix API.

    Ready to use as soon as it is constructed. Use it as a context manager
    (or call ``close()``) to release the pooled HTTP connection.

    Example usage:
        ```python
        from twitch_helix import Twitch

        with Twitch("your-client-id") as twitch:
            for stream in twitch.get_streams(3):
                print(stream.user_name, stream.viewer_count)
        ```

    Args:
        client_id: Client id from the Twitch developer console
            (https://dev.twitch.tv/console/apps)
        api_url: Helix base URL (default: https://api.twitch.tv/helix).
            Point it at a mock server in tests.
        timeout: Request timeout in seconds
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``

    Raises:
        InvalidHeaderValueError: If the client id cannot be sent as a header value
    """

    def __init__(
        self,
        client_id: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = HelixClient(
            client_id,
            api_url=api_url,
            timeout=timeout,
            transport=transport,
        )
        logger.debug("Twitch client created (api_url=%s)", api_url)

    @classmethod
    def from_config(
        cls,
        config: Config,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "Twitch":
        """Create a client from a Config.

        Raises:
            ConfigurationError: If the config has no client id
        """
        if not config.client_id:
            raise ConfigurationError(
                "No Twitch client id configured. Set TWITCH_CLIENT_ID."
            )
        return cls(
            config.client_id,
            api_url=config.api_url,
            timeout=config.request_timeout,
            transport=transport,
        )

    @property
    def client(self) -> HelixClient:
        """The underlying Helix client, for endpoints without a convenience method."""
        return self._client

    def __enter__(self) -> "Twitch":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP connection."""
        self._client.close()
        logger.debug("Twitch client closed")

    def get_streams(self, count: int) -> list[Stream]:
        """Get the top ``count`` live streams.

        Args:
            count: Number of streams to return; more than 100 spans several pages

        Returns:
            Exactly ``count`` streams, most viewers first
        """
        logger.info("Fetching top %d streams", count)
        return self._client.get_streams(count)

    def get_top_games(self, count: int) -> list[Game]:
        """Get the top ``count`` games by current viewers."""
        logger.info("Fetching top %d games", count)
        return self._client.get_top_games(count)

    def get_streams_page(self, first: int = 20, after: Optional[str] = None) -> StreamList:
        """Get a single page of streams, including the cursor for the next page."""
        logger.info("Fetching a page of %d streams", first)
        return self._client.get_streams_page(first=first, after=after)

    def get_top_games_page(self, first: int = 20, after: Optional[str] = None) -> GameList:
        """Get a single page of top games, including the cursor for the next page."""
        logger.info("Fetching a page of %d games", first)
        return self._client.get_top_games_page(first=first, after=after)
