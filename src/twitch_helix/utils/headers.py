"""Authentication headers for Helix requests."""

from twitch_helix.exceptions import InvalidHeaderValueError

CLIENT_ID_HEADER = "client-id"


def _is_forbidden_byte(byte: int) -> bool:
    # Control characters other than horizontal tab, plus DEL
    return (byte < 0x20 and byte != 0x09) or byte == 0x7F


def build_headers(client_id: str) -> dict[str, bytes]:
    """Build the headers required on every Helix request.

    Args:
        client_id: Application client id from the Twitch developer console

    Returns:
        Mapping of lowercase header name to the raw header value bytes

    Raises:
        InvalidHeaderValueError: If the client id cannot be sent as a header value
    """
    try:
        value = client_id.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidHeaderValueError("Client id is not valid UTF-8") from e

    if any(_is_forbidden_byte(byte) for byte in value):
        raise InvalidHeaderValueError(
            "Client id contains characters that are not allowed in a header value"
        )

    return {CLIENT_ID_HEADER: value}
