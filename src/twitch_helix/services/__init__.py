"""API client services for the Twitch Helix client."""

from twitch_helix.services.helix_client import HelixClient

__all__ = ["HelixClient"]
