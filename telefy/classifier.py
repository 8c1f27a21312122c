"""Map HTTP failures into the telefy error taxonomy."""

from __future__ import annotations

import httpx

from telefy.errors import NetworkError, TelefyError, TransportError, UnexpectedError


UNKNOWN_API_ERROR = "Unknown Telegram API error"


def api_description(response: httpx.Response) -> str:
    """Extract Telegram's error description from a response body."""
    try:
        data = response.json()
    except ValueError:
        return UNKNOWN_API_ERROR
    if isinstance(data, dict) and data.get("description"):
        return str(data["description"])
    return UNKNOWN_API_ERROR


def classify_status(status: int, description: str, channel: str) -> TransportError:
    if status == 400:
        return TransportError(
            f'Bad Request on channel "{channel}": {description}',
            "Check your message content, parse mode, or button format.",
            status_code=status,
        )
    if status == 401:
        return TransportError(
            f'Unauthorized on channel "{channel}": {description}',
            f'Verify the bot token for channel "{channel}" in your .env file.',
            status_code=status,
        )
    if status == 403:
        return TransportError(
            f'Forbidden on channel "{channel}": {description}',
            "Ensure the bot has permission to send messages to the chat ID "
            f'for channel "{channel}".',
            status_code=status,
        )
    if status == 404:
        return TransportError(
            f'Not Found on channel "{channel}": {description}',
            f'Check if the chat ID for channel "{channel}" is valid and the bot is added to the chat.',
            status_code=status,
        )
    return TransportError(
        f'Telegram API error on channel "{channel}": {description} (Status: {status})',
        "Check the Telegram API documentation for details.",
        status_code=status,
    )


def classify_response(response: httpx.Response, channel: str) -> TransportError:
    return classify_status(response.status_code, api_description(response), channel)


def classify(error: BaseException, channel: str) -> TelefyError:
    """Translate a failed send into a TelefyError. Pure: only inspects the error."""
    if isinstance(error, httpx.HTTPStatusError):
        return classify_response(error.response, channel)
    if isinstance(error, httpx.RequestError):
        return NetworkError(
            f'Network error on channel "{channel}": Could not connect to Telegram API',
            "Check your internet connection or try again later.",
        )
    return UnexpectedError(
        f'Unexpected error on channel "{channel}": {error}',
        "Check your code or report this issue to the package maintainer.",
    )
