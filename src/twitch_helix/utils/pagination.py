"""Pagination utilities for cursor-based Helix endpoints."""

from typing import Any, Optional

from twitch_helix.exceptions import MalformedPaginationEnvelopeError

QueryParams = list[tuple[str, str]]


def pages_to_request(count: int, endpoint_maximum: int) -> int:
    """Number of pages needed to collect ``count`` items.

    Example:
        pages_to_request(5, 2) -> 3 (page sizes 2, 2, 1)
    """
    if endpoint_maximum <= 0:
        raise ValueError("endpoint_maximum must be > 0")
    if count < 0:
        raise ValueError("count must be >= 0")
    return -(-count // endpoint_maximum)


def next_page_size(count: int, received: int, endpoint_maximum: int) -> int:
    """Size of the next page: the endpoint maximum, or the exact remainder."""
    return min(endpoint_maximum, count - received)


def build_page_query(
    query: Optional[QueryParams],
    first: int,
    after: str,
) -> QueryParams:
    """Append ``first`` and ``after`` to the caller's query parameters.

    Args:
        query: Base query parameters (must not contain first/after)
        first: Page size
        after: Cursor from the previous page, empty for the first page

    Returns:
        New list of query pairs; ``query`` is not modified
    """
    return [*(query or []), ("first", str(first)), ("after", after)]


def split_envelope(
    payload: Any,
    require_cursor: bool,
) -> tuple[list[Any], Optional[str]]:
    """Split a decoded page into its raw item list and continuation cursor.

    Expected shape: ``{"data": [...], "pagination": {"cursor": "..."}}``

    Args:
        payload: Generic decoded JSON of one page
        require_cursor: Whether more pages remain, making the cursor mandatory

    Returns:
        Tuple of (raw items, cursor). The cursor is None only when it was
        absent and not required.

    Raises:
        MalformedPaginationEnvelopeError: If items or a required cursor are missing
    """
    if not isinstance(payload, dict):
        raise MalformedPaginationEnvelopeError("Response body is not a JSON object")

    items = payload.get("data")
    if not isinstance(items, list):
        raise MalformedPaginationEnvelopeError("Response 'data' is missing or not an array")

    pagination = payload.get("pagination")
    cursor = pagination.get("cursor") if isinstance(pagination, dict) else None

    if cursor is not None and not isinstance(cursor, str):
        if require_cursor:
            raise MalformedPaginationEnvelopeError("Pagination cursor is not a string")
        cursor = None
    if cursor is None and require_cursor:
        raise MalformedPaginationEnvelopeError(
            "Pagination cursor is missing but more pages remain"
        )

    return items, cursor
