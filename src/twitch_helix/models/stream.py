"""Stream data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from twitch_helix.models.pagination import Page


class Stream(BaseModel):
    """A live stream as returned by ``GET /streams``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    user_id: str
    user_name: str
    game_id: str
    type_: str = Field(alias="type")  # "live", or "" on error
    title: str
    viewer_count: int
    started_at: datetime
    language: str
    thumbnail_url: str
    tag_ids: list[str] = Field(default_factory=list)  # Deprecated upstream, often empty
    user_login: str | None = None
    game_name: str | None = None
    tags: list[str] = Field(default_factory=list)
    is_mature: bool = False

    def thumbnail(self, width: int = 1280, height: int = 720) -> str:
        """Fill in the ``{width}x{height}`` template of the thumbnail URL."""
        return self.thumbnail_url.replace("{width}", str(width)).replace(
            "{height}", str(height)
        )


class StreamList(Page[Stream]):
    """A single page of streams."""

    pass
