"""Twitch Helix REST API client."""

import logging
from functools import lru_cache
from typing import Any, Optional, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from twitch_helix.config import DEFAULT_API_URL
from twitch_helix.exceptions import (
    DeserializationError,
    InvalidMethodError,
    PaginationExhaustedError,
    RequestFailedError,
    UnsuccessfulStatusError,
)
from twitch_helix.models.game import Game, GameList
from twitch_helix.models.stream import Stream, StreamList
from twitch_helix.utils.headers import build_headers
from twitch_helix.utils.pagination import (
    QueryParams,
    build_page_query,
    next_page_size,
    pages_to_request,
    split_envelope,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

HTTP_METHODS = frozenset(
    {"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "CONNECT", "TRACE"}
)

# Endpoint bindings: path and per-page maximum of `first`
STREAMS_ENDPOINT = "streams"
STREAMS_MAXIMUM = 100
TOP_GAMES_ENDPOINT = "games/top"
TOP_GAMES_MAXIMUM = 100


@lru_cache(maxsize=None)
def _type_adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


class HelixClient:
    """Synchronous client for the Twitch Helix REST API.

    Every request carries the ``client-id`` header. Nothing is retried:
    a failed call raises immediately, and a failed page aborts the whole
    paginated call.

    Raises:
        InvalidHeaderValueError: On construction, if the client id cannot be
            sent as a header value
    """

    def __init__(
        self,
        client_id: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client_id = client_id
        self._headers = build_headers(client_id)
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client_id(self) -> str:
        return self._client_id

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self.api_url,
                headers=self._headers,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "HelixClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def request(
        self,
        method: str,
        endpoint: str,
        query: Optional[QueryParams] = None,
        response_type: Any = Any,
    ) -> Any:
        """Make a single API request and decode the JSON body.

        Args:
            method: HTTP method, case-insensitive
            endpoint: Endpoint path relative to the API URL (e.g. "streams")
            query: Ordered query parameters, sent verbatim
            response_type: Type to decode the body into (a pydantic model,
                ``list[Model]``, ``dict[str, Any]``...). Defaults to plain JSON.

        Returns:
            The decoded body

        Raises:
            InvalidMethodError: If the method is not a known HTTP verb
            RequestFailedError: If the request could not be completed
            UnsuccessfulStatusError: If the response status is not 2xx
            DeserializationError: If the body does not decode into ``response_type``
        """
        verb = method.upper()
        if verb not in HTTP_METHODS:
            raise InvalidMethodError(method)

        client = self._get_client()
        logger.debug("%s %s params=%s", verb, endpoint, query)

        try:
            response = client.request(verb, endpoint, params=query)
        except httpx.RequestError as e:
            raise RequestFailedError(f"Request to {endpoint} failed: {e}") from e

        if not response.is_success:
            raise UnsuccessfulStatusError(
                f"Received error status code from API: {response.status_code}",
                status_code=response.status_code,
                response_body=response.text or None,
            )

        try:
            return _type_adapter(response_type).validate_json(response.content)
        except ValidationError as e:
            raise DeserializationError(
                f"Could not decode response from {endpoint}: {e}"
            ) from e

    def get_paginated(
        self,
        method: str,
        endpoint: str,
        item_type: type[T],
        *,
        endpoint_maximum: int,
        count: int,
        query: Optional[QueryParams] = None,
    ) -> list[T]:
        """Collect exactly ``count`` items from a cursor-paginated endpoint.

        Pages are requested one after another: ``endpoint_maximum`` items per
        page, the last page asking for the exact remainder. The cursor of each
        page is sent as ``after`` on the next one.

        Args:
            method: HTTP method
            endpoint: Endpoint path
            item_type: Type of a single item in the ``data`` array
            endpoint_maximum: Largest ``first`` the endpoint accepts
            count: Number of items to return
            query: Extra query parameters (must not contain first/after)

        Returns:
            List of ``count`` items in page order

        Raises:
            MalformedPaginationEnvelopeError: If a page lacks ``data`` or a needed cursor
            PaginationExhaustedError: If the API returned fewer than ``count`` items
            TwitchError: Any error from ``request``; partial results are discarded
        """
        total_pages = pages_to_request(count, endpoint_maximum)
        items_adapter = _type_adapter(list[item_type])

        items: list[T] = []
        cursor = ""

        for page in range(total_pages):
            if len(items) >= count:
                break

            first = next_page_size(count, len(items), endpoint_maximum)
            logger.debug(
                "Fetching page %d/%d of %s (first=%d)",
                page + 1,
                total_pages,
                endpoint,
                first,
            )

            payload = self.request(
                method,
                endpoint,
                query=build_page_query(query, first, cursor),
            )
            is_last = page == total_pages - 1
            raw_items, next_cursor = split_envelope(payload, require_cursor=not is_last)

            try:
                page_items = items_adapter.validate_python(raw_items)
            except ValidationError as e:
                raise DeserializationError(
                    f"Could not decode items from {endpoint}: {e}"
                ) from e

            items.extend(page_items)
            cursor = next_cursor or ""

        if len(items) < count:
            raise PaginationExhaustedError(requested=count, received=len(items))

        return items[:count]

    # Convenience methods for common endpoints

    def get_streams(self, count: int) -> list[Stream]:
        """Get the top live streams, most viewers first."""
        return self.get_paginated(
            "GET",
            STREAMS_ENDPOINT,
            Stream,
            endpoint_maximum=STREAMS_MAXIMUM,
            count=count,
        )

    def get_top_games(self, count: int) -> list[Game]:
        """Get the most watched games and categories."""
        return self.get_paginated(
            "GET",
            TOP_GAMES_ENDPOINT,
            Game,
            endpoint_maximum=TOP_GAMES_MAXIMUM,
            count=count,
        )

    def get_streams_page(self, first: int = 20, after: Optional[str] = None) -> StreamList:
        """Get one page of top streams together with its cursor."""
        if not 0 < first <= STREAMS_MAXIMUM:
            raise ValueError(f"first must be between 1 and {STREAMS_MAXIMUM}")

        query = [("first", str(first))]
        if after:
            query.append(("after", after))

        return self.request("GET", STREAMS_ENDPOINT, query=query, response_type=StreamList)

    def get_top_games_page(self, first: int = 20, after: Optional[str] = None) -> GameList:
        """Get one page of top games together with its cursor."""
        if not 0 < first <= TOP_GAMES_MAXIMUM:
            raise ValueError(f"first must be between 1 and {TOP_GAMES_MAXIMUM}")

        query = [("first", str(first))]
        if after:
            query.append(("after", after))

        return self.request("GET", TOP_GAMES_ENDPOINT, query=query, response_type=GameList)
