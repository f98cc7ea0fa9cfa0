"""Game (category) data models."""

from pydantic import BaseModel, ConfigDict

from twitch_helix.models.pagination import Page


class Game(BaseModel):
    """A game or category as returned by ``GET /games/top``."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    box_art_url: str
    igdb_id: str | None = None


class GameList(Page[Game]):
    """A single page of games."""

    pass
