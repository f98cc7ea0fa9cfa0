"""Utility modules for the Twitch Helix client."""

from twitch_helix.utils.headers import CLIENT_ID_HEADER, build_headers
from twitch_helix.utils.pagination import (
    build_page_query,
    next_page_size,
    pages_to_request,
    split_envelope,
)

__all__ = [
    "CLIENT_ID_HEADER",
    "build_headers",
    "pages_to_request",
    "next_page_size",
    "build_page_query",
    "split_envelope",
]
