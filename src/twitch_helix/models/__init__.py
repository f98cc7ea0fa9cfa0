"""Data models for the Twitch Helix client."""

from twitch_helix.models.game import Game, GameList
from twitch_helix.models.pagination import Page, Pagination
from twitch_helix.models.stream import Stream, StreamList

__all__ = [
    "Pagination",
    "Page",
    "Stream",
    "StreamList",
    "Game",
    "GameList",
]
