"""Twitch Helix - Typed client for the Twitch Helix REST API.

This package provides a synchronous client that:
- Authenticates every request with your application's client id
- Decodes responses into typed pydantic models
- Stitches cursor-paginated endpoints into a single list of exactly the
  requested size

Example usage:
    ```python
    from twitch_helix import Twitch

    with Twitch("your-client-id") as twitch:
        streams = twitch.get_streams(250)  # three requests: 100, 100, 50
        print(streams[0].user_name, streams[0].viewer_count)
    ```
"""

from twitch_helix.config import Config
from twitch_helix.exceptions import (
    ConfigurationError,
    DeserializationError,
    InvalidHeaderValueError,
    InvalidMethodError,
    MalformedPaginationEnvelopeError,
    PaginationExhaustedError,
    RequestFailedError,
    TwitchError,
    UnsuccessfulStatusError,
)
from twitch_helix.models import (
    Game,
    GameList,
    Page,
    Pagination,
    Stream,
    StreamList,
)
from twitch_helix.sdk import Twitch
from twitch_helix.services.helix_client import HelixClient

__version__ = "0.1.0"

__all__ = [
    # Main SDK class
    "Twitch",
    "HelixClient",
    # Configuration
    "Config",
    # Exceptions
    "TwitchError",
    "InvalidMethodError",
    "InvalidHeaderValueError",
    "RequestFailedError",
    "UnsuccessfulStatusError",
    "DeserializationError",
    "MalformedPaginationEnvelopeError",
    "PaginationExhaustedError",
    "ConfigurationError",
    # Models
    "Pagination",
    "Page",
    "Stream",
    "StreamList",
    "Game",
    "GameList",
]
