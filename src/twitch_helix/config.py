"""Configuration management for the Twitch Helix client."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_API_URL = "https://api.twitch.tv/helix"


@dataclass
class Config:
    """Application configuration."""

    client_id: str | None
    api_url: str = DEFAULT_API_URL

    # Number of items fetched by CLI commands when --count is not given
    default_count: int = 20

    # Timeouts
    request_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        # override=False ensures environment variables take precedence over .env
        load_dotenv(override=False)

        # Support both TWITCH_CLIENT_ID (preferred) and CLIENT_ID (fallback)
        client_id = os.getenv("TWITCH_CLIENT_ID") or os.getenv("CLIENT_ID")

        return cls(
            client_id=client_id,
            api_url=os.getenv("TWITCH_API_URL", DEFAULT_API_URL),
        )

    @property
    def has_client_id(self) -> bool:
        """Check if a client id is configured."""
        return bool(self.client_id)


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config | None) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config
