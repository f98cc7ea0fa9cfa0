"""Exceptions for the Twitch Helix client.

Exception Hierarchy:
    TwitchError (base)
    ├── InvalidMethodError (unknown HTTP verb, raised before any request)
    ├── InvalidHeaderValueError (client id cannot be sent as a header)
    ├── RequestFailedError (transport failure: DNS, connect, timeout)
    ├── UnsuccessfulStatusError (non-2xx HTTP response)
    ├── DeserializationError (invalid JSON or unexpected shape)
    ├── MalformedPaginationEnvelopeError (missing/invalid data or cursor)
    ├── PaginationExhaustedError (upstream ran out before `count` items)
    └── ConfigurationError (missing client id in config/environment)

None of these are retried by the client. A failure on any page of a
paginated call discards the items gathered so far.
"""

__all__ = [
    "TwitchError",
    "InvalidMethodError",
    "InvalidHeaderValueError",
    "RequestFailedError",
    "UnsuccessfulStatusError",
    "DeserializationError",
    "MalformedPaginationEnvelopeError",
    "PaginationExhaustedError",
    "ConfigurationError",
]


class TwitchError(Exception):
    """Base exception for all Twitch Helix client errors."""

    pass


class InvalidMethodError(TwitchError):
    """Raised when a request is made with an unrecognized HTTP method."""

    def __init__(self, method: str):
        super().__init__(f"Invalid HTTP method: {method!r}")
        self.method = method


class InvalidHeaderValueError(TwitchError):
    """Raised when the client id cannot be encoded as a header value."""

    pass


class RequestFailedError(TwitchError):
    """Raised when the HTTP request could not be completed.

    The underlying httpx exception is available as ``__cause__``.
    """

    pass


class UnsuccessfulStatusError(TwitchError):
    """Raised when the API responds with a status outside the 2xx range."""

    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class DeserializationError(TwitchError):
    """Raised when a response body is not valid JSON or has the wrong shape."""

    pass


class MalformedPaginationEnvelopeError(TwitchError):
    """Raised when a paginated response lacks a usable item list or cursor."""

    pass


class PaginationExhaustedError(TwitchError):
    """Raised when every computed page was fetched but fewer items arrived.

    The items that were received are not returned.
    """

    def __init__(self, requested: int, received: int):
        super().__init__(
            f"Requested {requested} items but the API returned only {received}"
        )
        self.requested = requested
        self.received = received


class ConfigurationError(TwitchError):
    """Raised when required configuration (the client id) is missing."""

    pass
