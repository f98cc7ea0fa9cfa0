"""Tests for data models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from conftest import game_data, stream_data
from twitch_helix.models.game import Game, GameList
from twitch_helix.models.pagination import Page, Pagination
from twitch_helix.models.stream import Stream, StreamList


class TestStream:
    """Tests for Stream model."""

    def test_from_api(self):
        """Test creating Stream from an API object."""
        stream = Stream.model_validate(stream_data(3))

        assert stream.id == "40003"
        assert stream.user_name == "Streamer3"
        assert stream.type_ == "live"
        assert stream.viewer_count == 9997
        assert stream.started_at == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        assert stream.tags == ["English"]

    def test_original_fields_only(self):
        """Test that optional newer fields may be absent."""
        api_data = {
            "id": "1",
            "user_id": "2",
            "user_name": "someone",
            "game_id": "3",
            "type": "live",
            "title": "hello",
            "viewer_count": 5,
            "started_at": "2020-05-01T10:00:00Z",
            "language": "de",
            "thumbnail_url": "https://example.com/{width}x{height}.jpg",
            "tag_ids": ["6ea6bca4-4712-4ab9-a906-e3336a9d8039"],
        }

        stream = Stream.model_validate(api_data)

        assert stream.tag_ids == ["6ea6bca4-4712-4ab9-a906-e3336a9d8039"]
        assert stream.user_login is None
        assert stream.game_name is None
        assert stream.is_mature is False

    def test_missing_required_field(self):
        """Test that a required field cannot be omitted."""
        api_data = stream_data(0)
        del api_data["viewer_count"]

        with pytest.raises(ValidationError):
            Stream.model_validate(api_data)

    def test_dump_uses_api_names(self):
        """Test that dumping by alias restores the 'type' key."""
        dumped = Stream.model_validate(stream_data(0)).model_dump(by_alias=True)

        assert dumped["type"] == "live"
        assert "type_" not in dumped

    def test_immutable(self):
        """Test that streams cannot be modified after construction."""
        stream = Stream.model_validate(stream_data(0))

        with pytest.raises(ValidationError):
            stream.title = "changed"

    def test_thumbnail(self):
        """Test filling in the thumbnail size template."""
        stream = Stream.model_validate(stream_data(1))

        assert stream.thumbnail(320, 180).endswith("live_user_streamer1-320x180.jpg")


class TestGame:
    """Tests for Game model."""

    def test_from_api(self):
        """Test creating Game from an API object."""
        game = Game.model_validate(game_data(2))

        assert game.id == "502"
        assert game.name == "Game 2"
        assert game.igdb_id == "902"

    def test_igdb_id_optional(self):
        """Test that igdb_id may be missing."""
        game = Game.model_validate({"id": "1", "name": "x", "box_art_url": "y"})

        assert game.igdb_id is None


class TestPage:
    """Tests for paginated envelope models."""

    def test_stream_list(self):
        """Test decoding a full streams envelope."""
        envelope = StreamList.model_validate(
            {"data": [stream_data(0), stream_data(1)], "pagination": {"cursor": "eyJiIjpudWxs"}}
        )

        assert len(envelope.data) == 2
        assert envelope.cursor == "eyJiIjpudWxs"

    def test_empty_pagination(self):
        """Test that the last page's empty pagination block has no cursor."""
        envelope = GameList.model_validate({"data": [game_data(0)], "pagination": {}})

        assert envelope.cursor is None
        assert envelope.pagination == Pagination()

    def test_missing_pagination(self):
        """Test that endpoints without pagination still decode."""
        envelope = Page[Game].model_validate({"data": []})

        assert envelope.data == []
        assert envelope.cursor is None
